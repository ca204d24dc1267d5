"""
module termprompts.prompt.backends

Contains the concrete PromptBackend integrations shipped with termprompts
"""

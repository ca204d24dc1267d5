"""
module termprompts.prompt

Contains everything related to rendering a single prompt: the abstract
PromptBackend, its concrete integrations (i.e., prompt_toolkit), and the
dataclasses, enums, and exceptions they share
"""

from enum import StrEnum


class PromptKind(StrEnum):
    CONFIRM = "confirm"
    INPUT = "input"
    PASSWORD = "password"

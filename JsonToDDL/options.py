# Contains the generation settings shared by the synthesizer and the emitter
from dataclasses import dataclass


@dataclass(frozen=True)
class GenerationOptions:
    """
    Settings passed explicitly through every recursive generation call.

    Attributes:
        character_set: MySQL table character set
        collation: MySQL table collation
        storage_engine: MySQL storage engine
        text_length: Width given to text/varchar columns
        if_not_exists: Emit CREATE TABLE IF NOT EXISTS instead of plain CREATE TABLE
        strict: Reject null values instead of mapping them to nullable text columns
    """
    character_set: str = "utf8"
    collation: str = "utf8_general_ci"
    storage_engine: str = "InnoDB"
    text_length: int = 65535
    if_not_exists: bool = True
    strict: bool = False

    def __post_init__(self):
        if self.text_length <= 0:
            raise ValueError("text_length must be a positive integer")


DEFAULT_OPTIONS = GenerationOptions()

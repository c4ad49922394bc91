from enum import Enum
from pydantic import BaseModel, ConfigDict

class WordEntry(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int = 0          # Backend identity, 0 for the text backend
    word: str            # Normalized lowercase text
    used: bool = False   # Set once the word has been solved

class MarkResult(str, Enum):
    UPDATED = "updated"      # Row flipped to used
    STALE = "stale"          # No row matched the identity
    UNTRACKED = "untracked"  # Backend keeps no usage state

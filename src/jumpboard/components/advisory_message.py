from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class AdvisoryMessage:
    text: Optional[str] = None

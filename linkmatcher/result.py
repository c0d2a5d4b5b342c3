from dataclasses import dataclass, field
from typing import List, Optional

from .errors import FailureKind, LinkMatcherError


@dataclass
class ExtractionResult:
    """Outcome of one extraction call: links on success, a failure kind otherwise."""

    source: str
    links: List[str] = field(default_factory=list)
    error: Optional[str] = None
    kind: Optional[FailureKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, source: str, exc: LinkMatcherError) -> "ExtractionResult":
        return cls(source=source, links=[], error=str(exc), kind=exc.kind)

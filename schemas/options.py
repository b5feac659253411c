from typing import Any, Optional, Union

from pydantic import BaseModel, Field

from utils.case import CasingConvention

DEFAULT_FROM = CasingConvention.CAMEL
DEFAULT_TO = CasingConvention.KEBAB
DEFAULT_RESPONSE_TO = CasingConvention.CAMEL

# Unknown convention names are kept as plain strings; they convert nothing.
LetterCase = Union[CasingConvention, str]


class LetterCaseOptions(BaseModel):
    """Middleware options: convert keys FROM one letter case TO another."""
    from_: Optional[LetterCase] = Field(None, alias="from")
    to: Optional[LetterCase] = None

    model_config = {"populate_by_name": True, "frozen": True}

    @classmethod
    def parse(cls, options: Any) -> "LetterCaseOptions":
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls.model_validate(options)

    def resolve_from(self, default: LetterCase = DEFAULT_FROM) -> LetterCase:
        return self.from_ or default

    def resolve_to(self, default: LetterCase = DEFAULT_TO) -> LetterCase:
        return self.to or default

from typing import Optional

from pydantic import BaseModel, ConfigDict

from utils.case import to_kebab_case


class ProfileUpdate(BaseModel):
    """Handler-side profile payload; fields travel in kebab-case behind the letter case middleware."""
    display_name: str
    email_address: Optional[str] = None
    newsletter_opt_in: bool = False

    model_config = ConfigDict(alias_generator=to_kebab_case, populate_by_name=True)

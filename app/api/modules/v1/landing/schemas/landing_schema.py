from typing import List, Optional

from pydantic import BaseModel


class FooterLink(BaseModel):
    label: str
    url: str


class LandingPage(BaseModel):
    title: str
    description: str
    features: List[str]
    is_mobile: bool
    platform_note: str
    platform_details: Optional[str] = None
    signup_label: str
    download_url: Optional[str] = None
    footer_links: List[FooterLink]

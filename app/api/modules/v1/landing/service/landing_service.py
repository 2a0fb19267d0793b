from app.api.core.config import Settings, settings
from app.api.modules.v1.download.service.download_service import download_url
from app.api.modules.v1.landing.schemas.landing_schema import FooterLink, LandingPage

TITLE = "Hey, this is Spill."
DESCRIPTION = (
    "One distraction-free space to spill your thoughts for a set time: brainstorm ideas, "
    "draft scripts, process life, whatever. Plus dictation when your fingers can't keep up, "
    "and voice chat with your notes when you need to think out loud."
)
FEATURES = ["Open-source.", "Stays local.", "Spill it out!"]

DESKTOP_NOTE = "( MacOS only )"
MOBILE_NOTE = "Hey there, mobile user."
MOBILE_DETAILS = (
    "Right now we're focused on nailing the macOS experience, but iOS is definitely coming. "
    "Drop your email and you'll be first to know when we ship mobile."
)


def build_landing_page(is_mobile: bool, app_settings: Settings = settings) -> LandingPage:
    """
    Assemble the landing page copy for a mobile or desktop visitor.

    Args:
        is_mobile: Whether the visitor gets the mobile experience.
        app_settings: Source of the footer link targets.

    Returns:
        LandingPage: Copy, call-to-action label and links for the page.
    """
    return LandingPage(
        title=TITLE,
        description=DESCRIPTION,
        features=FEATURES,
        is_mobile=is_mobile,
        platform_note=MOBILE_NOTE if is_mobile else DESKTOP_NOTE,
        platform_details=MOBILE_DETAILS if is_mobile else None,
        signup_label="Notify Me" if is_mobile else "Download",
        download_url=None if is_mobile else download_url(),
        footer_links=[
            FooterLink(label="Source Code", url=app_settings.SOURCE_CODE_URL),
            FooterLink(label="Join group chat", url=app_settings.GROUP_CHAT_URL),
        ],
    )

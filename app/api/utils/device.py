import re
from typing import Optional

MOBILE_USER_AGENT_PATTERN = re.compile(
    r"android|webos|iphone|ipad|ipod|blackberry|iemobile|opera mini", re.IGNORECASE
)
MOBILE_MAX_VIEWPORT_WIDTH = 768


def is_mobile_client(user_agent: Optional[str], viewport_width: Optional[int] = None) -> bool:
    """
    Decide whether a visitor should get the mobile landing experience.

    Args:
        user_agent: Value of the ``User-Agent`` header, if any.
        viewport_width: Width in CSS pixels reported by the page, if any.

    Returns:
        bool: True for a known mobile user agent or a narrow viewport.
    """
    if user_agent and MOBILE_USER_AGENT_PATTERN.search(user_agent):
        return True
    return viewport_width is not None and viewport_width <= MOBILE_MAX_VIEWPORT_WIDTH

"""Profile Image Route — /profile.png serves the bot avatar shipped in the plugin bundle.

Invariants:
    - Bundle resolution failure → 500 (cause logged, not exposed)
    - Missing or unreadable image → 500, never 404: the asset always ships with the bundle
    - The file is closed before the handler returns, on success and failure
"""

import logging

from fastapi import Response

from wrangler.api.request_context import RequestContext
from wrangler.core.errors import BundlePathError, InternalResourceError
from wrangler.core.host_protocols import BundleProvider

logger = logging.getLogger(__name__)

ROUTE_PROFILE_IMAGE = "/profile.png"
PROFILE_IMAGE_PARTS = ("assets", "profile.png")
PROFILE_IMAGE_MEDIA_TYPE = "image/png"


async def handle_profile_image(
    ctx: RequestContext, bundle: BundleProvider,
) -> Response:
    try:
        bundle_path = bundle.get_bundle_path()
    except BundlePathError as e:
        logger.error(f"Unable to get bundle path, err={e}")
        raise InternalResourceError("bundle path", e)

    image_path = bundle_path.joinpath(*PROFILE_IMAGE_PARTS)
    try:
        with image_path.open("rb") as img:
            content = img.read()
    except OSError as e:
        logger.error(f"Unable to read profile image, err={e}")
        raise InternalResourceError(str(image_path), e)

    return Response(content=content, media_type=PROFILE_IMAGE_MEDIA_TYPE)

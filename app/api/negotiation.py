"""
Content negotiation for response bodies (JSON default, XML secondary).
Challenge: Honour Accept with q-values and fail with 406 instead of silently falling back.
Design: Endpoints hand a payload to render(); it picks the media type and encodes.
"""

import json
import re
from typing import Any
from xml.etree import ElementTree

from fastapi import Request, Response
from fastapi.encoders import jsonable_encoder

from app.core.exceptions import NotAcceptable

JSON = "application/json"
XML = "application/xml"

# Preference order when several types are equally acceptable
SUPPORTED_MEDIA_TYPES = (JSON, XML)

CONTENT_TYPES = {
    JSON: "application/json; charset=utf-8",
    XML: "application/xml; charset=utf-8",
}

_XML_INVALID_CHARS = re.compile("[^\x09\x0A\x0D\x20-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")


def _parse_accept(accept: str) -> list[tuple[str, float]]:
    """'application/xml;q=0.9, */*;q=0.1' -> [(media_range, q), ...]."""
    ranges = []
    for part in accept.split(","):
        media_range, *params = [piece.strip() for piece in part.split(";")]
        if not media_range:
            continue
        quality = 1.0
        for param in params:
            name, _, value = param.partition("=")
            if name.strip().lower() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        ranges.append((media_range.lower(), quality))
    return ranges


def _specificity(media_range: str, media_type: str) -> int:
    """-1 if the range does not cover media_type, else 0 (*/*), 1 (type/*) or 2 (exact)."""
    if media_range in ("*/*", "*"):
        return 0
    range_type, _, range_subtype = media_range.partition("/")
    main_type, _, subtype = media_type.partition("/")
    if range_type != main_type:
        return -1
    if range_subtype == "*":
        return 1
    return 2 if range_subtype == subtype else -1


def _quality(media_type: str, ranges: list[tuple[str, float]]) -> float:
    """q of the most specific range covering media_type (0 when none does)."""
    best_specificity, best_quality = -1, 0.0
    for media_range, quality in ranges:
        specificity = _specificity(media_range, media_type)
        if specificity > best_specificity:
            best_specificity, best_quality = specificity, quality
    return best_quality


def select_media_type(accept: str | None) -> str:
    """Pick the response media type for an Accept header. Raises NotAcceptable."""
    if not accept or not accept.strip():
        return JSON
    ranges = _parse_accept(accept)
    # max() keeps the first of equal scores, so ties go to SUPPORTED_MEDIA_TYPES order
    best = max(SUPPORTED_MEDIA_TYPES, key=lambda media_type: _quality(media_type, ranges))
    if _quality(best, ranges) <= 0:
        raise NotAcceptable(accept)
    return best


def content_type_for(request: Request) -> str:
    """Full Content-Type header value a body for this request would be sent with."""
    return CONTENT_TYPES[select_media_type(request.headers.get("accept"))]


def _xml_text(value: str) -> str:
    """Drop characters XML 1.0 cannot carry (C0 controls other than tab/LF/CR, surrogates, U+FFFE/FFFF)."""
    return _XML_INVALID_CHARS.sub("", value)


def _xml_element(tag: str, value: Any, item_tag: str = "string") -> ElementTree.Element:
    element = ElementTree.Element(tag)
    if isinstance(value, dict):
        for key, child in value.items():
            element.append(_xml_element(str(key), child))
    elif isinstance(value, list):
        for child in value:
            element.append(_xml_element(item_tag, child))
    elif isinstance(value, bool):
        element.text = "true" if value else "false"
    elif value is not None:
        element.text = _xml_text(str(value))
    return element


def to_xml(content: Any, root: str) -> bytes:
    """
    Encode JSON-compatible content as XML under ``root``.

    A list under an ``ArrayOf<Name>`` root gets ``<Name>`` children; nested
    string lists (error messages) get ``<string>`` children.
    """
    item_tag = root[len("ArrayOf"):] if root.startswith("ArrayOf") else "string"
    element = _xml_element(root, jsonable_encoder(content), item_tag)
    return ElementTree.tostring(element, encoding="utf-8", xml_declaration=True)


def render(
    request: Request,
    content: Any,
    *,
    xml_root: str,
    status_code: int = 200,
    headers: dict[str, str] | None = None,
) -> Response:
    """Negotiate and encode ``content``. Raises NotAcceptable when nothing fits Accept."""
    media_type = select_media_type(request.headers.get("accept"))
    if media_type == XML:
        body = to_xml(content, xml_root)
    else:
        body = json.dumps(jsonable_encoder(content), ensure_ascii=False).encode("utf-8")
    return Response(
        content=body,
        status_code=status_code,
        headers=headers,
        media_type=CONTENT_TYPES[media_type],
    )

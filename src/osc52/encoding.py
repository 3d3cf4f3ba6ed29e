#!/usr/bin/env python3
"""
Payload encoding for OSC 52 set requests.

The payload is carried as base64 (RFC 4648, standard alphabet, padded) of its
UTF-8 bytes. Terminals cap the length of escape sequences they accept, so a
caller may set a byte limit above which the request is not emitted at all.

GNU screen cannot pass a long DCS body through intact. For screen mode the
encoded text is split into SCREEN_CHUNK_SIZE segments, each closed and
reopened as its own DCS.
"""
import base64

from osc52.constants import SCREEN_CHUNK_SEPARATOR, SCREEN_CHUNK_SIZE


def _utf8(payload: str) -> bytes:
    """Encode a payload as UTF-8, replacing lone surrogates with "?"."""
    return payload.encode("utf-8", errors="replace")


def payload_size(payload: str) -> int:
    """
    Return the UTF-8 encoded length of a payload in bytes.

    Args:
        payload: Text to be copied.

    Returns:
        Number of bytes in the UTF-8 encoding, not number of characters.
        A lone surrogate counts as the single "?" byte it is encoded as.
    """
    return len(_utf8(payload))


def exceeds_limit(payload: str, limit: int) -> bool:
    """
    Check if a payload is too large for the configured limit.

    Args:
        payload: Text to be copied.
        limit: Maximum payload size in bytes. 0 means no limit.

    Returns:
        True if limit > 0 and the payload's byte length is above it.
    """
    return limit > 0 and payload_size(payload) > limit


def encode_payload(payload: str) -> str:
    """
    Base64 encode the UTF-8 bytes of a payload.

    Args:
        payload: Text to be copied.

    Returns:
        Padded base64 text with no line breaks.
    """
    return base64.b64encode(_utf8(payload)).decode("ascii")


def chunk(text: str, size: int = SCREEN_CHUNK_SIZE) -> list[str]:
    """
    Split text into consecutive segments of at most size characters.

    Args:
        text: Text to split.
        size: Segment length. Only the last segment may be shorter.

    Returns:
        List of segments in order. Empty text gives an empty list.
    """
    return [text[i:i + size] for i in range(0, len(text), size)]


def screen_join(encoded: str) -> str:
    """
    Re-chunk base64 text so screen forwards it unchanged.

    Args:
        encoded: Base64 payload text.

    Returns:
        The segments joined by a DCS terminator and a new DCS introducer.
    """
    return SCREEN_CHUNK_SEPARATOR.join(chunk(encoded))

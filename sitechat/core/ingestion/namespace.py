"""
Namespace derivation.

Every ingested URL gets a readable partition key inside the shared vector
index: host dots and path slashes become dashes, e.g.
``https://docs.example.com/guide/intro/`` -> ``docs-example-com-guide-intro``.
Same host and path means same namespace; ports, query strings and fragments
are ignored. Absolute URLs without a host (``file:``, ``urn:``) contribute an
empty host, so only their path shows up in the key.

Dependencies: urllib (stdlib), sitechat.core.exceptions
System role: Tenant key for vector index partitioning
"""

from urllib.parse import urlsplit

from sitechat.core.exceptions import ValidationError


def derive_namespace(url: str) -> str:
    """
    Derive the namespace for a URL.

    Args:
        url: Absolute URL

    Returns:
        str: Namespace key

    Raises:
        ValidationError: When the URL has no scheme or yields an empty key
    """
    try:
        parts = urlsplit(url.strip())
        host = parts.hostname or ""
    except ValueError as e:
        raise ValidationError(f"Invalid URL: {url}", field="url") from e

    if not parts.scheme:
        raise ValidationError(f"URL must be absolute: {url}", field="url")

    namespace = (host.replace(".", "-") + parts.path.replace("/", "-")).rstrip("-")
    if not namespace:
        raise ValidationError(f"URL has no host or path: {url}", field="url")
    return namespace

# mela_recipes/services/ids.py
import hashlib
import re
import uuid
from typing import Optional

# scheme://rest, e.g. https://example.com/pancakes
_URL_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://(.+)$")


def derive_recipe_id(link: Optional[str], raw: bytes) -> str:
    """Returns the id Mela would give a recipe exported without one.

    The link without its protocol when the link is a URL, otherwise a UUID
    derived from the file contents so the same file always gets the same id.
    """
    if link:
        m = _URL_RE.match(link.strip())
        if m:
            return m.group(1)
    digest = hashlib.sha256(raw).hexdigest()
    return str(uuid.uuid5(uuid.NAMESPACE_OID, digest)).upper()

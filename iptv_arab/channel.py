import re

from .mappings import CHANNEL_NAME_RULES

UNKNOWN_CHANNEL = "Unknown Channel"

# Quality / region annotations such as "(1080p)" or "[Geo-blocked]"
ANNOTATION_PATTERN = re.compile(r'\([^()]*\)|\[[^\[\]]*\]')

NAME_RULES = [
    (network, re.compile(r'\b' + re.escape(network) + r'\b', re.IGNORECASE), canonical)
    for network, canonical in CHANNEL_NAME_RULES
]


def normalize_name(name):
    """
    Clean a display name and apply the first matching network rule.

    Annotations in parentheses or brackets are dropped. A name equal to a
    known network becomes its canonical label; otherwise only the matched
    part is replaced. At most one rule applies.
    """
    cleaned, count = ANNOTATION_PATTERN.subn('', name)
    # innermost first, so nested annotations need more passes
    while count:
        cleaned, count = ANNOTATION_PATTERN.subn('', cleaned)
    cleaned = re.sub(r'\s+', ' ', cleaned).strip()

    for network, pattern, canonical in NAME_RULES:
        if not pattern.search(cleaned):
            continue
        if canonical in cleaned:
            return cleaned
        if cleaned.lower() == network.lower():
            return canonical
        return pattern.sub(lambda _: canonical, cleaned, count=1)

    return cleaned


def region_code(tvg_id):
    """Two-letter code from ids like 'MBC1.sa' or 'MBC1.sa@HD', else None"""
    if not tvg_id or '.' not in tvg_id:
        return None
    code = tvg_id.split('@', 1)[0].rsplit('.', 1)[-1].lower()
    if len(code) == 2 and code.isascii() and code.isalpha():
        return code
    return None


# =======================================================================================
# CHANNEL CLASS
# =======================================================================================

class Channel:
    """One stream, keyed by url, with tags added by the pipeline"""

    __slots__ = ['url', 'name', 'logo', 'group', 'tvg_id', 'extinf',
                 'is_arab', 'country', 'category_id']

    def __init__(self, url, name=UNKNOWN_CHANNEL, logo='', group='', tvg_id='', extinf='',
                 is_arab=False, country=None, category_id=None):
        self.url = url.strip()
        self.name = name
        self.logo = logo
        self.group = group
        self.tvg_id = tvg_id
        self.extinf = extinf
        self.is_arab = is_arab
        self.country = country
        self.category_id = category_id

    @property
    def region(self):
        return region_code(self.tvg_id)

    def to_extinf(self, label, name):
        """Rebuild the metadata line for one output group"""
        attrs = []
        for key, value in (('tvg-id', self.tvg_id), ('tvg-logo', self.logo)):
            if value:
                attrs.append(f'{key}="{value}"')
        attrs.append(f'group-title="{label}"')

        return f"#EXTINF:-1 {' '.join(attrs)},{name}"

    def __repr__(self):
        return f"Channel({self.name!r}, {self.url!r})"

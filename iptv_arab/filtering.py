import logging
from collections import OrderedDict

from .config import (
    BLOCKED_NAME_KEYWORDS,
    BLOCKED_REGIONS,
    COUNTRY_CODES,
    EXCLUDED_GROUPS,
    EXCLUDED_KEYWORDS,
    FORCE_INCLUDE,
    RESTRICTED_NAME,
    WESTERN_CODES,
)

# Source kinds, in processing order
SOURCE_COUNTRY = 'country'
SOURCE_LANGUAGE = 'language'
SOURCE_CUSTOM = 'custom'
SOURCE_CATEGORY = 'category'

# =======================================================================================
# POLICY FILTER
# =======================================================================================

def is_excluded(channel):
    """Exclusion keywords are matched case-sensitively against name and group"""
    return any(kw in channel.name or kw in channel.group for kw in EXCLUDED_KEYWORDS)


def is_blocked_region(channel):
    tvg_id = channel.tvg_id.lower()
    return any(region in tvg_id for region in BLOCKED_REGIONS)


def is_restricted_name(channel):
    keyword, required = RESTRICTED_NAME
    return keyword in channel.name and required not in channel.name


def passes_country_gate(channel):
    """Category feeds are global: keep Arab or Western channels, or forced names"""
    name = channel.name.lower()
    if any(kw.lower() in name for kw in FORCE_INCLUDE):
        return True

    country = channel.country or channel.region
    return country in COUNTRY_CODES or country in WESTERN_CODES


def accept_channel(channel, source_kind):
    if is_excluded(channel):
        return False

    if channel.group.lower() in EXCLUDED_GROUPS:
        return False

    if is_blocked_region(channel):
        return False

    name = channel.name.lower()
    if any(kw in name for kw in BLOCKED_NAME_KEYWORDS):
        return False

    if is_restricted_name(channel):
        return False

    if source_kind == SOURCE_CATEGORY:
        return passes_country_gate(channel)

    return True


# =======================================================================================
# MERGING
# =======================================================================================

def merge_channel(existing, incoming):
    """
    Fold a duplicate url into the record seen first.

    The first source keeps its name, logo, group and id. Tags only grow:
    country and category are filled when missing, is_arab is never unset.
    """
    if existing is None:
        return incoming

    if not existing.country and incoming.country:
        existing.country = incoming.country
    if not existing.category_id and incoming.category_id:
        existing.category_id = incoming.category_id
    if incoming.is_arab:
        existing.is_arab = True

    return existing


class ChannelIndex:
    """Channels keyed by url, in first-seen order"""

    def __init__(self):
        self._channels = OrderedDict()
        self.duplicates = 0

    def add(self, channel):
        existing = self._channels.get(channel.url)
        if existing is not None:
            self.duplicates += 1
        self._channels[channel.url] = merge_channel(existing, channel)

    def extend(self, channels):
        for channel in channels:
            self.add(channel)

    def __len__(self):
        return len(self._channels)

    def __iter__(self):
        return iter(self._channels.values())


def filter_channels(channels, source_kind):
    kept = [ch for ch in channels if accept_channel(ch, source_kind)]
    logging.info(f"  Kept {len(kept)}/{len(channels)} after policy filter")
    return kept

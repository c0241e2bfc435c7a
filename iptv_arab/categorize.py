from collections import namedtuple

from .channel import normalize_name
from .config import COUNTRY_CODES
from .mappings import CATEGORY_MAP, COUNTRY_MAP, GENRE_KEYWORDS, SORT_PRIORITY

PLAYLIST_HEADER = '#EXTM3U'

PlaylistEntry = namedtuple('PlaylistEntry', ['label', 'name', 'extinf', 'url'])

# =======================================================================================
# CATEGORIES
# =======================================================================================

def guess_genre(channel, name=None):
    """Keyword fallback over the source group and the normalized name"""
    if name is None:
        name = normalize_name(channel.name)
    text = f"{channel.group} {name}".lower()

    for genre, keywords in GENRE_KEYWORDS:
        if any(kw in text for kw in keywords):
            return genre

    if channel.is_arab:
        return 'general'
    return None


def assign_categories(channel, name=None):
    labels = set()

    if channel.country in COUNTRY_CODES:
        labels.add(COUNTRY_MAP[channel.country])

    if channel.category_id:
        if channel.category_id in CATEGORY_MAP:
            labels.add(CATEGORY_MAP[channel.category_id])
    else:
        genre = guess_genre(channel, name)
        if genre:
            labels.add(CATEGORY_MAP[genre])

    return labels


def expand_entries(channels):
    """One entry per (channel, label); unlabelled channels are dropped"""
    entries = []
    for channel in channels:
        name = normalize_name(channel.name)
        for label in assign_categories(channel, name):
            entries.append(PlaylistEntry(label, name, channel.to_extinf(label, name), channel.url))
    return entries


# =======================================================================================
# OUTPUT
# =======================================================================================

PRIORITY_RANK = {label: rank for rank, label in enumerate(SORT_PRIORITY)}


def entry_sort_key(entry):
    # lowercase before uppercase on case-only differences
    name_key = (entry.name.casefold(), entry.name.swapcase())
    rank = PRIORITY_RANK.get(entry.label)
    if rank is not None:
        return (rank, '', name_key)
    return (len(PRIORITY_RANK), entry.label, name_key)


def sort_entries(entries):
    return sorted(entries, key=entry_sort_key)


def generate_m3u_playlist(entries):
    lines = [PLAYLIST_HEADER]
    for entry in entries:
        lines.append(entry.extinf)
        lines.append(entry.url)
    return '\n'.join(lines) + '\n'


def write_playlist(path, content):
    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)

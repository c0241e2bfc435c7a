import re

from .channel import Channel, UNKNOWN_CHANNEL

# =======================================================================================
# PARSING
# =======================================================================================

EXTINF_MARKER = '#EXTINF:'
ATTRIBUTE_PATTERN = re.compile(r'([\w-]+)="([^"]*)"')


def parse_extinf_line(extinf_line, url):
    attributes = dict(ATTRIBUTE_PATTERN.findall(extinf_line))

    name = ''
    if ',' in extinf_line:
        name = extinf_line.rsplit(',', 1)[1].strip()

    return Channel(
        url,
        name=name or UNKNOWN_CHANNEL,
        logo=attributes.get('tvg-logo', ''),
        group=attributes.get('group-title', ''),
        tvg_id=attributes.get('tvg-id', ''),
        extinf=extinf_line,
    )


def parse_m3u_content(content):
    """
    Turn extended M3U text into Channel records.

    Each #EXTINF line is held until the next http line, which it describes.
    URL lines with no pending metadata are skipped. Never raises.
    """
    if not content:
        return []

    content = content.replace('\r\n', '\n').replace('\r', '\n')
    if content.startswith('\ufeff'):
        content = content[1:]

    channels = []
    pending = None

    for line in content.split('\n'):
        line = line.strip()

        if line.startswith(EXTINF_MARKER):
            pending = line
        elif line.startswith('http'):
            if pending:
                channels.append(parse_extinf_line(pending, line))
                pending = None

    return channels

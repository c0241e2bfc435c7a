import asyncio
import logging
import sys
from collections import Counter, namedtuple
from datetime import datetime

import aiohttp

from .categorize import expand_entries, generate_m3u_playlist, sort_entries, write_playlist
from .config import (
    CATEGORY_SOURCE,
    CATEGORY_SOURCES,
    COUNTRY_CODES,
    COUNTRY_SOURCE,
    FETCH_TIMEOUT,
    LANGUAGE_SOURCE,
    OUTPUT_FILENAME,
    REQUEST_HEADERS,
    setup_logging,
)
from .custom_channels import custom_channels
from .filtering import (
    SOURCE_CATEGORY,
    SOURCE_COUNTRY,
    SOURCE_CUSTOM,
    SOURCE_LANGUAGE,
    ChannelIndex,
    filter_channels,
)
from .parsing import parse_m3u_content

Source = namedtuple('Source', ['kind', 'url', 'tag'])


def default_sources():
    """Feeds in processing order; the first feed to list a url owns its metadata"""
    sources = [Source(SOURCE_COUNTRY, COUNTRY_SOURCE.format(code=code), code)
               for code in COUNTRY_CODES]
    sources.append(Source(SOURCE_LANGUAGE, LANGUAGE_SOURCE, 'ara'))
    sources.append(Source(SOURCE_CUSTOM, None, None))
    sources.extend(Source(SOURCE_CATEGORY, CATEGORY_SOURCE.format(category=category), category)
                   for category in CATEGORY_SOURCES)
    return sources

# =======================================================================================
# FETCHING
# =======================================================================================

async def fetch_source(session, url, timeout=FETCH_TIMEOUT):
    """Playlist text, or '' when the source is unreachable"""
    try:
        logging.info(f"Fetching: {url}")

        async with session.get(
            url,
            timeout=aiohttp.ClientTimeout(total=timeout),
            allow_redirects=True
        ) as response:
            if response.status != 200:
                logging.warning(f"HTTP {response.status}: {url}")
                return ''
            return await response.text(errors='ignore')

    except asyncio.TimeoutError:
        logging.warning(f"Timeout: {url}")
    except aiohttp.ClientError as e:
        logging.error(f"Error: {url} - {str(e)[:50]}")
    return ''


def tag_channels(channels, source):
    for ch in channels:
        if source.kind == SOURCE_COUNTRY:
            ch.country = source.tag
            ch.is_arab = True
        elif source.kind == SOURCE_LANGUAGE:
            ch.country = ch.region
            ch.is_arab = True
        elif source.kind == SOURCE_CATEGORY:
            ch.category_id = source.tag
            ch.country = ch.region
            ch.is_arab = ch.country in COUNTRY_CODES
    return channels


async def load_source(session, source):
    if source.kind == SOURCE_CUSTOM:
        return custom_channels()

    content = await fetch_source(session, source.url)
    channels = parse_m3u_content(content)
    logging.info(f"✓ {len(channels)} channels from {source.url}")
    return tag_channels(channels, source)


async def collect_channels(session, sources):
    index = ChannelIndex()

    for source in sources:
        channels = await load_source(session, source)
        index.extend(filter_channels(channels, source.kind))

    logging.info(f"Unique channels: {len(index)} ({index.duplicates} duplicate urls merged)")
    return index

# =======================================================================================
# MAIN
# =======================================================================================

def build_playlist(channels):
    entries = sort_entries(expand_entries(channels))

    logging.info(f"Playlist entries: {len(entries)}")
    for label, count in Counter(entry.label for entry in entries).most_common():
        logging.info(f"  └─ {label}: {count}")

    return generate_m3u_playlist(entries)


async def main(output_path=OUTPUT_FILENAME, sources=None):
    start_time = datetime.now()
    logging.info("=" * 80)
    logging.info("ARAB IPTV PLAYLIST GENERATOR")
    logging.info("=" * 80)

    if sources is None:
        sources = default_sources()

    async with aiohttp.ClientSession(headers=REQUEST_HEADERS) as session:
        index = await collect_channels(session, sources)

    content = build_playlist(index)

    try:
        write_playlist(output_path, content)
    except OSError as e:
        logging.error(f"Could not write playlist to {output_path}: {e}")
        return 1

    duration = datetime.now() - start_time
    logging.info(f"Execution time: {duration.total_seconds():.1f}s")
    logging.info(f"Playlist saved to: {output_path}")
    return 0


def run():
    setup_logging()
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()

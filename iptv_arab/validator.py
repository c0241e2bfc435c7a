"""Drop playlist entries whose stream does not answer a quick HEAD probe."""

import asyncio
import logging
import sys
from collections import namedtuple

import aiohttp

from .categorize import generate_m3u_playlist, PlaylistEntry, write_playlist
from .config import (
    OUTPUT_FILENAME,
    PLAYER_USER_AGENT,
    STREAM_CHECK_TIMEOUT,
    VALIDATE_BATCH_SIZE,
    setup_logging,
)
from .parsing import parse_m3u_content

StreamStatus = namedtuple('StreamStatus', ['ok', 'code'])


async def check_stream(session, url, timeout=STREAM_CHECK_TIMEOUT):
    try:
        async with session.head(
            url,
            timeout=aiohttp.ClientTimeout(total=timeout),
            headers={'User-Agent': PLAYER_USER_AGENT},
            allow_redirects=False
        ) as response:
            return StreamStatus(200 <= response.status < 400, response.status)

    except asyncio.TimeoutError:
        return StreamStatus(False, 'TIMEOUT')
    except aiohttp.ClientError as e:
        return StreamStatus(False, type(e).__name__)


async def validate_channels(session, channels, batch_size=VALIDATE_BATCH_SIZE,
                            timeout=STREAM_CHECK_TIMEOUT):
    valid = []

    for i in range(0, len(channels), batch_size):
        batch = channels[i:i + batch_size]
        results = await asyncio.gather(*[check_stream(session, ch.url, timeout) for ch in batch])

        for ch, status in zip(batch, results):
            if status.ok:
                logging.info(f"[PASS] {ch.name}")
                valid.append(ch)
            else:
                logging.info(f"[FAIL] {ch.name} ({status.code}) - REMOVED")

    return valid


async def main(playlist_path=OUTPUT_FILENAME, timeout=STREAM_CHECK_TIMEOUT):
    try:
        with open(playlist_path, encoding='utf-8') as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logging.error(f"Could not read playlist: {playlist_path} ({e})")
        return 1

    channels = parse_m3u_content(content)
    logging.info(f"Validating {len(channels)} channels...")

    async with aiohttp.ClientSession() as session:
        valid = await validate_channels(session, channels, timeout=timeout)

    entries = [PlaylistEntry(None, ch.name, ch.extinf, ch.url) for ch in valid]
    try:
        write_playlist(playlist_path, generate_m3u_playlist(entries))
    except OSError as e:
        logging.error(f"Could not rewrite {playlist_path}: {e}")
        return 1

    logging.info(f"Playlist updated! Removed {len(channels) - len(valid)} broken streams.")
    logging.info(f"Final clean count: {len(valid)}")
    return 0


def run():
    setup_logging()
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()

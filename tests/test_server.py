import asyncio

from aiohttp.test_utils import TestClient, TestServer

from iptv_arab.server import create_app, get_local_ip

PLAYLIST = '#EXTM3U\n#EXTINF:-1 group-title="G",A\nhttps://streams.test/a\n'


async def fetch(playlist_path, path, method='GET'):
    async with TestClient(TestServer(create_app(str(playlist_path)))) as client:
        resp = await client.request(method, path)
        return resp.status, resp.headers, await resp.read()


def test_serves_playlist_on_both_paths(tmp_path):
    playlist = tmp_path / "playlist.m3u"
    playlist.write_text(PLAYLIST, encoding='utf-8')

    for path in ('/', '/playlist.m3u'):
        status, headers, body = asyncio.run(fetch(playlist, path))

        assert status == 200
        assert body == PLAYLIST.encode('utf-8')
        assert headers['Content-Type'] == 'application/x-mpegurl'
        assert headers['Access-Control-Allow-Origin'] == '*'
        assert headers['Cache-Control'] == 'no-cache'


def test_other_paths_not_found(tmp_path):
    playlist = tmp_path / "playlist.m3u"
    playlist.write_text(PLAYLIST, encoding='utf-8')

    status, _, body = asyncio.run(fetch(playlist, '/channels.m3u'))

    assert status == 404
    assert body == b'Not found. Use /playlist.m3u'


def test_non_get_on_playlist_path_not_found(tmp_path):
    status, _, _ = asyncio.run(fetch(tmp_path / "playlist.m3u", '/playlist.m3u', method='POST'))

    assert status == 404


def test_missing_file_is_server_error(tmp_path):
    status, _, body = asyncio.run(fetch(tmp_path / "none.m3u", '/'))

    assert status == 500
    assert body == b'Error loading playlist.'


def test_local_ip_is_a_host():
    assert get_local_ip()

import logging
import socket

from aiohttp import web

from .config import OUTPUT_FILENAME, SERVER_PORT, setup_logging

PLAYLIST_HEADERS = {
    'Content-Type': 'application/x-mpegurl',
    'Access-Control-Allow-Origin': '*',
    'Cache-Control': 'no-cache',
}


def get_local_ip():
    """LAN address players on the same network can reach"""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        sock.connect(('10.255.255.255', 1))
        return sock.getsockname()[0]
    except OSError:
        return 'localhost'
    finally:
        sock.close()


def create_app(playlist_path=OUTPUT_FILENAME):
    async def serve_playlist(request):
        try:
            with open(playlist_path, 'rb') as f:
                data = f.read()
        except OSError as e:
            logging.error(f"Error loading playlist {playlist_path}: {e}")
            return web.Response(status=500, text='Error loading playlist.')
        return web.Response(body=data, headers=PLAYLIST_HEADERS)

    async def not_found(request):
        return web.Response(status=404, text='Not found. Use /playlist.m3u')

    app = web.Application()
    app.router.add_get('/', serve_playlist)
    app.router.add_get('/playlist.m3u', serve_playlist)
    app.router.add_route('*', '/{tail:.*}', not_found)
    return app


def run(port=SERVER_PORT):
    setup_logging()
    ip = get_local_ip()
    logging.info('-' * 51)
    logging.info('🚀 Playlist Server is Running!')
    logging.info(f'📡 Local Link:   http://localhost:{port}/playlist.m3u')
    logging.info(f'🌍 Network Link: http://{ip}:{port}/playlist.m3u')
    logging.info('-' * 51)
    web.run_app(create_app(), port=port, print=None)


if __name__ == "__main__":
    run()

#!/usr/bin/env python3
"""
Gatekeeper Demo - Application Server

Sits behind nginx + OAuth2 Proxy and echoes the identity headers they inject.
"""

from aiohttp import web

from config import AppConfig
from identity import EMAIL_HEADER, USER_HEADER, Identity, decode_header, now_iso
from pages import render_index


@web.middleware
async def log_requests(request, handler):
    """Log every request and the auth headers passed by nginx"""
    path = decode_header(request.raw_path)
    print(f"{now_iso()} - {request.method} {path}", flush=True)

    user = decode_header(request.headers.get(USER_HEADER))
    if user:
        print(f"  Authenticated User: {user}", flush=True)

    email = decode_header(request.headers.get(EMAIL_HEADER))
    if email:
        print(f"  Email: {email}", flush=True)

    return await handler(request)


async def handle_health(request):
    """Health check, left open by nginx"""
    return web.json_response({
        'status': 'healthy',
        'timestamp': now_iso()
    })


async def handle_index(request):
    """Landing page showing who nginx says the caller is"""
    identity = Identity.from_headers(request.headers)
    return web.Response(
        text=render_index(identity, now_iso()),
        content_type='text/html'
    )


async def handle_user(request):
    """Identity headers as JSON"""
    identity = Identity.from_headers(request.headers)
    payload = identity.to_dict()
    payload['timestamp'] = now_iso()
    return web.json_response(payload)


async def init_app():
    """Initialize application"""
    app = web.Application(middlewares=[log_requests])
    app.router.add_get('/health', handle_health)
    app.router.add_get('/', handle_index)
    app.router.add_get('/api/user', handle_user)

    return app


def announce(config: AppConfig):
    """Startup lines, printed by run_app once the port is bound"""
    def _print(_message):
        print(f"Demo app running on port {config.port}", flush=True)
        print("This app has NO built-in authentication!", flush=True)
        print("Authentication is handled by nginx + OAuth2 Proxy", flush=True)

    return _print


def main():
    """Main entry point"""
    config = AppConfig.from_env()
    app = init_app()

    try:
        web.run_app(
            app,
            host=config.host,
            port=config.port,
            print=announce(config),
            access_log=None
        )
    except KeyboardInterrupt:
        print("\nShutting down...", flush=True)


if __name__ == '__main__':
    main()

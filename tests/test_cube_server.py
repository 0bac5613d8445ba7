import socket

import pytest

import cube_server
from cube_api import create_app
from cube_config import PORT_ATTEMPTS, SERVER_HOST
from cube_server import bind_server, create_arg_parser
from cube_solver import CubeSolver


@pytest.fixture
def app():
    return create_app(CubeSolver(search=lambda f: ""))


def test_arg_parser_defaults():
    args = create_arg_parser().parse_args([])
    assert args.host == SERVER_HOST
    assert args.attempts == PORT_ATTEMPTS
    assert args.debug is False


def test_arg_parser_overrides():
    args = create_arg_parser().parse_args(["--host", "0.0.0.0", "--port", "9001", "--debug"])
    assert args.host == "0.0.0.0"
    assert args.port == 9001
    assert args.debug is True


def test_bind_server_skips_busy_port(app):
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        s.listen(1)
        busy = s.getsockname()[1]
        server = bind_server(app, "127.0.0.1", busy, attempts=20)
        try:
            assert server.server_port != busy
            assert busy < server.server_port < busy + 20
        finally:
            server.server_close()


def test_bind_server_gives_up(app):
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        s.listen(1)
        busy = s.getsockname()[1]
        with pytest.raises(OSError):
            bind_server(app, "127.0.0.1", busy, attempts=1)


def test_bind_server_survives_werkzeug_exit(app, monkeypatch):
    real_make_server = cube_server.make_server
    tried = []

    def flaky_make_server(host, port, wsgi_app, threaded=False):
        tried.append(port)
        if len(tried) == 1:
            raise SystemExit(1)
        return real_make_server(host, 0, wsgi_app, threaded=threaded)

    monkeypatch.setattr(cube_server, "make_server", flaky_make_server)
    server = bind_server(app, "127.0.0.1", 50000, attempts=3)
    try:
        assert tried == [50000, 50001]
    finally:
        server.server_close()

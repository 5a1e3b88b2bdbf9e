import socket

"""Network helper utilities for the Cocktail Shopping Assistant.

Kept apart from `cocktail.main` so startup stays focused on running the
server while other modules can reuse the helper.
"""


def get_local_ip() -> str:
    """Return the LAN address the OS would route through, or '127.0.0.1'.

    A UDP socket is "connected" to a public address only so the OS picks a
    source interface; nothing is sent.
    """
    s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        s.connect(("8.8.8.8", 80))
        ip = str(s.getsockname()[0])
    except OSError:
        ip = "127.0.0.1"
    finally:
        s.close()
    return ip


def lan_url(port: int) -> str:
    """URL other devices on the same network can open, e.g. a phone at the bar."""
    return f"http://{get_local_ip()}:{port}"

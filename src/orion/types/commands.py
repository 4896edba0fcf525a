"""Fixed command strings of the logger request/reply protocol."""

PROTOCOL = "LOGGER/1.0"


class _Comms:
    PING = f"{PROTOCOL} PING"
    PONG = f"{PROTOCOL} PONG"
    STOP = f"{PROTOCOL} STOP"
    OK = f"{PROTOCOL} OK"
    ECHO = f"{PROTOCOL} ECHO"
    ADD = f"{PROTOCOL} ADD"


class CONSTS:
    COMMS = _Comms

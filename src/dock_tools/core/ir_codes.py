from dock_tools.models import AuthMessage, CodeFormat, IrSendCommand, IrStopCommand

DEFAULT_TORTURE_CODE = "17;0x2A4C0A86028E;48;0"

_GLOBAL_CACHE_PREFIX = "sendir"
_HEX_SEPARATOR = ";"


def infer_code_format(code: str) -> CodeFormat:
    """Guess the IR code encoding from its text.

    Global Caché codes start with ``sendir``, hex codes are ``;`` separated
    (``<protocol>;<hex>;<bits>;<repeat>``), anything else is taken as Pronto.
    """
    if code.startswith(_GLOBAL_CACHE_PREFIX):
        return "gc"
    if _HEX_SEPARATOR in code:
        return "hex"
    return "pronto"


def build_send_command(code: str, repeat: int | None = None) -> IrSendCommand:
    return IrSendCommand(code=code, format=infer_code_format(code), repeat=repeat)


def build_stop_command() -> IrStopCommand:
    return IrStopCommand()


def build_auth_message(token: str) -> AuthMessage:
    return AuthMessage(token=token)

"""Renderer de códigos de pareamento como QR no terminal do operador."""

from __future__ import annotations

import io
import sys
from typing import TextIO

import qrcode


class TerminalQrRenderer:
    """Desenha o código como QR em ASCII (meio-bloco) no stream informado."""

    def __init__(self, stream: TextIO | None = None, border: int = 1) -> None:
        self._stream = stream
        self._border = border

    def render(self, code: str) -> None:
        qr = qrcode.QRCode(border=self._border)
        qr.add_data(code)
        qr.make(fit=True)

        buffer = io.StringIO()
        qr.print_ascii(out=buffer, invert=True)

        stream = self._stream or sys.stdout
        stream.write(buffer.getvalue())
        stream.flush()

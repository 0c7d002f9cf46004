"""ContactCard: cartão de contato enviado ao grupo como vCard 3.0."""

from __future__ import annotations

from dataclasses import dataclass

VCARD_VERSION = "3.0"


def escape_vcard_text(value: str) -> str:
    """Escapa valor de texto conforme vCard 3.0 (RFC 2426 § 4)."""
    return (
        value.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\r\n", "\\n")
        .replace("\n", "\\n")
        .replace("\r", "\\n")
    )


def single_line(value: str) -> str:
    """Remove quebras de linha de um valor que não é texto (ex: TEL)."""
    return "".join(value.splitlines())


@dataclass(frozen=True, slots=True)
class ContactCard:
    """Contato transitório montado por requisição; nunca persistido."""

    display_name: str
    phone_number: str

    def to_vcard(self) -> str:
        """Bloco vCard com FN e TEL;TYPE=CELL, linhas separadas por `\\n`."""
        lines = (
            "BEGIN:VCARD",
            f"VERSION:{VCARD_VERSION}",
            f"FN:{escape_vcard_text(self.display_name)}",
            f"TEL;TYPE=CELL:{single_line(self.phone_number)}",
            "END:VCARD",
        )
        return "\n".join(lines)

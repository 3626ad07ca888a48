"""Round-trip demo: cipher a sentence with a random shift and break it again."""

import logging
import random

from caesar_breaker.core.config import get_settings
from caesar_breaker.core.logging import configure_logging
from caesar_breaker.services.alphabet import ALPHABET_SIZE
from caesar_breaker.services.engines.caesar import CaesarCipher
from caesar_breaker.services.presentation.banner import border
from caesar_breaker.services.tables.registry import TableRegistry

logger = logging.getLogger(__name__)

SAMPLE_TEXT = "Hallo, Ich bin Christian aus Deutschland und meine Arbeit ist wunderbar"
SAMPLE_LANGUAGE = "german"


def build_trace(cipher: CaesarCipher, plaintext: str, offset: int) -> str:
    """Cipher ``plaintext``, break it and describe each step."""
    original = cipher.normalize(plaintext)
    ciphered = cipher.cipher(original, offset)
    recovered = cipher.recover(ciphered)

    steps = [
        f"original: '{original}'",
        f"offset: {offset}",
        f"ciphered: {ciphered}",
        f"statistic: {recovered.offset}",
        f"deciphered: {recovered.plaintext}",
    ]
    return "\n↓\n".join(steps)


def run_demo(
    language: str | None = None,
    offset: int | None = None,
    rng: random.Random | None = None,
    text: str = SAMPLE_TEXT,
) -> str:
    """
    Run the round trip and return the framed trace.

    Args:
        language: Reference table to score with (default: the sample's language)
        offset: Shift to cipher with (default: random in [0, 25])
        rng: Random source for the shift
        text: Plaintext to cipher

    Returns:
        The trace inside a banner
    """
    table = TableRegistry().get(language or SAMPLE_LANGUAGE)
    if offset is None:
        offset = (rng or random).randrange(ALPHABET_SIZE)

    logger.info("Running demo with shift %d and table '%s'", offset, table.name)
    return border(build_trace(CaesarCipher(table=table), text, offset), 2, 1)


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    print(run_demo())


if __name__ == "__main__":
    main()

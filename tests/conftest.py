"""
Vigenere Breaker - Pytest fixtures.
"""

import pytest

ENGLISH_SAMPLE = (
    "It was a bright cold day in early spring, and the river that ran past the old mill was "
    "swollen with the last of the melting snow. The miller had lived beside that water for "
    "most of his life, and he knew every sound it made. In the mornings he would walk down to "
    "the bank before the sun was fully up, listening to the wheel turn slowly in the current, "
    "and he would think about the people who had worked there before him. His father had "
    "taught him how to grind the grain, how to read the weather from the color of the sky, and "
    "how to keep the heavy stones balanced so that the flour came out fine and even. "
    "Cryptography, or cryptology, is the practice and study of techniques for secure "
    "communication in the presence of third parties called adversaries. More generally, "
    "cryptography is about constructing and analyzing protocols that prevent third parties or "
    "the public from reading private messages. Modern cryptography exists at the intersection "
    "of the disciplines of mathematics, computer science, information security, electrical "
    "engineering, digital signal processing, physics, and others. Before the modern era, "
    "cryptography focused on message confidentiality, that is to say the conversion of "
    "messages from a comprehensible form into an incomprehensible one and back again at the "
    "other end, rendering it unreadable by interceptors or eavesdroppers without secret "
    "knowledge, namely the key needed for decryption of that message. "
    "The village itself was small, with a single street of stone houses and a church whose "
    "bell could be heard across the fields on a quiet evening. Children ran between the houses "
    "after school, and their parents gathered in the square to talk about the harvest, the "
    "price of wheat, and the news that travelers brought from the city. Nobody in the village "
    "was rich, but few of them were poor, and most were content with the life they had made. "
    "When the war came it changed everything. The young men left for the front, the market "
    "grew quiet, and the miller found himself working alone for the first time in many years. "
    "He wrote letters to his son every week, and because he feared that they would be read by "
    "strangers, he began to hide the most important words using a simple method his own "
    "grandfather had shown him long ago. Each letter of the message was shifted forward by an "
    "amount taken from a secret word, and the word was repeated again and again until the "
    "whole message had been changed. To anyone who did not know the word, the letters looked "
    "like nonsense. His son, who had learned the same method as a boy, could read them easily. "
    "For many months the letters travelled back and forth, carrying news of the farm, of the "
    "weather, and of the small events that make up ordinary life. It was only much later that "
    "the miller learned how weak his method really was. A patient reader who counted the "
    "letters carefully could discover the length of the secret word, and once the length was "
    "known, each group of letters could be attacked on its own as if it were a simple shift. "
    "The most common letter in English is the letter e, followed by t, a, o, and n, and a "
    "clever analyst could use these patterns to uncover the whole key in an afternoon. "
    "The story of the miller is not unusual. For hundreds of years people believed that the "
    "repeating key cipher could not be broken, and it was even called the indecipherable "
    "cipher. Yet the mathematics of chance showed that every language leaves its fingerprint "
    "on the text written in it, and no simple shifting of letters can completely erase that "
    "fingerprint. The lesson that the miller learned, and that every student of secret "
    "writing eventually learns, is that the strength of a cipher depends on far more than how "
    "strange its output appears to the eye."
)


@pytest.fixture
def english_sample():
    """Long natural-English passage (well over 2000 letters)."""
    return ENGLISH_SAMPLE


@pytest.fixture
def write_file(tmp_path):
    """Factory: write text to tmp_path/name and return the path as str."""
    def _write(name: str, text: str) -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write

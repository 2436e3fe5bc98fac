import io

import pytest

from minitools.ciphers import (
    Method,
    caesar_cipher,
    main,
    rot13,
    rot13_main,
    transpose_cipher,
    transpose_line,
    vigenere_cipher,
    xor_cipher,
)

SAMPLE = "Hello, World!\nSecond line 42 ~ zZ aA\n"


@pytest.mark.parametrize("key", range(26))
def test_caesar_round_trip(key):
    encrypted = caesar_cipher(SAMPLE, key, True)
    assert caesar_cipher(encrypted, key, False) == SAMPLE


def test_caesar_leaves_non_letters():
    assert caesar_cipher("123 !?\n", 5, True) == "123 !?\n"


def test_caesar_thirteen_matches_rot13_on_lowercase():
    assert caesar_cipher("hello world", 13, True) == rot13("hello world")


def test_caesar_uses_absolute_key_when_encrypting():
    assert caesar_cipher(SAMPLE, -4, True) == caesar_cipher(SAMPLE, 4, True)


def test_rot13_is_involution_up_to_case():
    text = "Attack At Dawn, 123!"
    assert rot13(rot13(text)) == text.lower()


def test_rot13_lowercases():
    assert rot13("ABC xyz") == rot13("abc xyz")


def test_xor_round_trip():
    data = b"hello world\nsecond line\n"
    assert xor_cipher(xor_cipher(data, 7), 7) == data


def test_xor_zero_key_is_identity():
    assert xor_cipher(b"abc\ndef", 0) == b"abc\ndef"


def test_xor_truncates_at_zero_byte():
    assert len(xor_cipher(b"abc", ord("b"))) == 1


def test_transpose_known_value():
    assert transpose_line("abcd", 2) == "acbd"


@pytest.mark.parametrize("key", [1, 6])
def test_transpose_identity_keys(key):
    assert transpose_line("abcdef", key) == "abcdef"


def test_transpose_pads_with_x():
    result = transpose_line("abc", 2)
    assert sorted(result) == sorted("abcX")


def test_transpose_cipher_preserves_characters_per_line():
    text = "first line\nsecond\n"
    result = transpose_cipher(text, 3)
    assert sorted(result.replace("X", "")) == sorted(text)


def test_transpose_rejects_zero_key():
    with pytest.raises(ValueError):
        transpose_line("abc", 0)


def test_vigenere_classic_example():
    assert vigenere_cipher("ATTACKATDAWN", "LEMON", True) == "LXFOPVEFRNHR"


def test_vigenere_round_trip():
    text = "attack at dawn!\nhold the line\n"
    encrypted = vigenere_cipher(text, "lemon", True)
    assert vigenere_cipher(encrypted, "lemon", False) == text


def test_vigenere_empty_key():
    with pytest.raises(ValueError):
        vigenere_cipher("abc", "", True)


def test_method_values():
    assert Method("xor") is Method.XOR
    with pytest.raises(ValueError):
        Method("aes")


def test_main_caesar_round_trip(tmp_path):
    source = tmp_path / "in.txt"
    encrypted = tmp_path / "enc.txt"
    decrypted = tmp_path / "dec.txt"
    source.write_text(SAMPLE)
    assert main(["-e", "-k", "3", "-i", str(source), "-o", str(encrypted), "-m", "caesar"]) == 0
    assert main(["--decrypt", "--key", "3", "--input", str(encrypted),
                 "--output", str(decrypted), "--method", "caesar"]) == 0
    assert decrypted.read_text() == SAMPLE
    assert encrypted.read_text() == caesar_cipher(SAMPLE, 3, True)


def test_main_xor_round_trip(tmp_path, capsys):
    source = tmp_path / "in.txt"
    encrypted = tmp_path / "enc.bin"
    decrypted = tmp_path / "dec.txt"
    source.write_bytes(b"plain text\n")
    assert main(["-e", "-k", "9", "-i", str(source), "-o", str(encrypted), "-m", "xor"]) == 0
    assert capsys.readouterr().out.count("Processing complete!") == 2
    assert main(["-e", "-k", "9", "-i", str(encrypted), "-o", str(decrypted), "-m", "xor"]) == 0
    assert decrypted.read_bytes() == b"plain text\n"


def test_main_rejects_both_modes(tmp_path):
    source = tmp_path / "in.txt"
    source.write_text("x")
    assert main(["-e", "-d", "-i", str(source), "-o", str(tmp_path / "o"), "-m", "xor"]) == 1


def test_main_missing_input(tmp_path, capsys):
    assert main(["-e", "-i", str(tmp_path / "none"), "-o", str(tmp_path / "o")]) == 1
    assert "Input File Path does not exist" in capsys.readouterr().out


def test_main_unknown_method_writes_nothing(tmp_path, capsys):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("data")
    assert main(["-e", "-i", str(source), "-o", str(target), "-m", "aes"]) == 0
    assert target.read_bytes() == b""
    assert "Unknown encryption method" in capsys.readouterr().err


def test_rot13_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Hello There\n"))
    assert rot13_main([]) == 0
    assert f"Cipher text is {rot13('Hello There')} " in capsys.readouterr().out
from __future__ import annotations

"""Command-line front-end for the hangeul codec (`hangeul` console script, root `main.py`).

Subcommands:
  decompose TEXT                 per-character choseong/jungseong/jongseong
  compose CHO JUNG [JONG]        phonemes (by name, conjoining jamo, or "-" for absent) -> syllable
  nfd TEXT / nfc TEXT            Hangul-only decomposition / composition
  classify TEXT                  syllable / jamo / compatibility jamo, modern or ancient

Defaults come from settings.yaml (see hangeul/services/settings_store.py);
command-line flags win.
"""

import argparse
import logging
import os
import sys
from typing import Any, Optional

import yaml

from hangeul.domain.builder import SyllableBuilder
from hangeul.domain.classification import classify
from hangeul.domain.jamo import Choseong, Jongseong, Jungseong, Phoneme, phoneme_from_char, phoneme_from_name
from hangeul.domain.syllable import LazySyllable, ModernSyllable
from hangeul.domain.text import compose_text, decompose_text
from hangeul.services.settings_store import CODECS, FORMATS, SettingsStore

logger = logging.getLogger(__name__)

DEBUG_ENV = "HANGEUL_DEBUG"

# Marks a deliberately empty slot on the compose command line
ABSENT = "-"

_CODEC_TYPES = {
    "modern": ModernSyllable,
    "lazy": LazySyllable,
}


# -------------------------------------------------
#          HELPERS
# -------------------------------------------------

def _debug_enabled() -> bool:
    return str(os.getenv(DEBUG_ENV, "")).strip().lower() in ("1", "true", "yes", "on")


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose or _debug_enabled() else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _scalar_label(ch: str) -> str:
    return "U+{:04X}".format(ord(ch))


def _phoneme_label(phoneme: Optional[Phoneme]) -> str:
    if phoneme is None:
        return ABSENT
    return "{}({})".format(phoneme.name, int(phoneme))


def parse_phoneme(phoneme_type: type, token: str) -> Phoneme:
    """Resolve a CLI token to a phoneme of `phoneme_type`.

    Accepts a member name ("giyeok", "SSANG_SIOT") or the conjoining jamo itself.

    Raises:
        ValueError: if the token names nothing of that type.
    """
    found = phoneme_type.from_char(token) if len(token or "") == 1 else None
    if found is None:
        found = phoneme_from_name(phoneme_type, token)
    if found is None:
        raise ValueError("Unknown {}: {!r}".format(phoneme_type.__name__.lower(), token))
    return found


def parse_slot(phoneme_type: type, token: Optional[str]) -> Optional[Phoneme]:
    """Like parse_phoneme, but a missing token or "-" leaves the slot empty."""
    if token is None or token.strip() == ABSENT:
        return None
    return parse_phoneme(phoneme_type, token)


def describe_char(ch: str, *, codec: str = "modern", show_fillers: bool = False) -> dict[str, Any]:
    """Return a plain dict describing one input character."""
    info: dict[str, Any] = {
        "char": ch,
        "scalar": _scalar_label(ch),
        "class": classify(ch).data_class.value,
    }

    syllable = _CODEC_TYPES[codec].from_char(ch)
    if syllable is not None:
        info["choseong"] = _phoneme_label(syllable.choseong)
        info["jungseong"] = _phoneme_label(syllable.jungseong)
        info["jongseong"] = _phoneme_label(syllable.jongseong)
        info["decomposed"] = SyllableBuilder.from_parts(
            syllable.choseong, syllable.jungseong, syllable.jongseong
        ).decomposed()
        return info

    phoneme = phoneme_from_char(ch)
    if phoneme is not None:
        builder = SyllableBuilder.new().set(phoneme)
        info["choseong"] = _phoneme_label(builder.choseong)
        info["jungseong"] = _phoneme_label(builder.jungseong)
        info["jongseong"] = _phoneme_label(builder.jongseong)
        if show_fillers:
            info["decomposed"] = builder.decomposed()
    return info


def _emit(rows: list[dict[str, Any]], fmt: str) -> None:
    if fmt == "yaml":
        sys.stdout.write(yaml.safe_dump(rows, allow_unicode=True, sort_keys=False))
        return
    for row in rows:
        fields = [row.get("char", ""), row.get("scalar", ""), row.get("class", "")]
        for key in ("choseong", "jungseong", "jongseong", "decomposed"):
            if key in row:
                fields.append(str(row[key]))
        print("\t".join(fields))


# -------------------------------------------------
#          COMMANDS
# -------------------------------------------------

def cmd_decompose(args: argparse.Namespace, settings: SettingsStore) -> int:
    codec = args.codec or settings.get_codec()
    fmt = args.format or settings.get_format()
    show_fillers = settings.get_show_fillers()
    logger.debug("decompose: codec=%s format=%s show_fillers=%s", codec, fmt, show_fillers)
    rows = [describe_char(ch, codec=codec, show_fillers=show_fillers) for ch in args.text]
    _emit(rows, fmt)
    return 0


def cmd_compose(args: argparse.Namespace, settings: SettingsStore) -> int:
    builder = SyllableBuilder.from_parts(
        parse_slot(Choseong, args.choseong),
        parse_slot(Jungseong, args.jungseong),
        parse_slot(Jongseong, args.jongseong),
    )
    composed = builder.to_char()
    if composed is None:
        logger.warning("Incomplete syllable: choseong=%s jungseong=%s", builder.choseong, builder.jungseong)
        print(builder.decomposed())
        return 1
    print(composed)
    return 0


def cmd_nfd(args: argparse.Namespace, settings: SettingsStore) -> int:
    print(decompose_text(args.text))
    return 0


def cmd_nfc(args: argparse.Namespace, settings: SettingsStore) -> int:
    print(compose_text(args.text))
    return 0


def cmd_classify(args: argparse.Namespace, settings: SettingsStore) -> int:
    fmt = args.format or settings.get_format()
    rows = []
    for ch in args.text:
        c = classify(ch)
        rows.append({
            "char": ch,
            "scalar": _scalar_label(ch),
            "class": c.data_class.value,
            "modernity": c.modernity.value if c.modernity is not None else "-",
        })
    if fmt == "yaml":
        _emit(rows, fmt)
    else:
        for row in rows:
            print("\t".join([row["char"], row["scalar"], row["class"], row["modernity"]]))
    return 0


# -------------------------------------------------
#          ENTRY POINT
# -------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hangeul", description="Compose and decompose modern Hangul syllables.")
    parser.add_argument("--settings", default=None, help="Path to settings.yaml.")
    parser.add_argument("--codec", choices=list(CODECS), default=None, help="Syllable codec for decompose.")
    parser.add_argument("--format", choices=list(FORMATS), default=None, help="Output format.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("decompose", help="Show the phonemes of each character.")
    p.add_argument("text")
    p.set_defaults(func=cmd_decompose)

    p = sub.add_parser("compose", help="Compose a syllable from phonemes.")
    p.add_argument("choseong", help="Name, conjoining jamo, or \"-\" for none.")
    p.add_argument("jungseong", help="Name, conjoining jamo, or \"-\" for none.")
    p.add_argument("jongseong", nargs="?", default=None)
    p.set_defaults(func=cmd_compose)

    p = sub.add_parser("nfd", help="Decompose Hangul syllables into conjoining jamo.")
    p.add_argument("text")
    p.set_defaults(func=cmd_nfd)

    p = sub.add_parser("nfc", help="Compose conjoining jamo into Hangul syllables.")
    p.add_argument("text")
    p.set_defaults(func=cmd_nfc)

    p = sub.add_parser("classify", help="Classify each character.")
    p.add_argument("text")
    p.set_defaults(func=cmd_classify)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    settings = SettingsStore(args.settings)
    logger.debug("Using settings file %s", settings.path)
    try:
        return int(args.func(args, settings))
    except ValueError as e:
        print("error: {}".format(e), file=sys.stderr)
        return 2


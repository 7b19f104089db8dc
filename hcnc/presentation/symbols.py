"""
Symbols — Visual vocabulary for validation results

Progressive enhancement: Unicode when supported, ASCII fallback.
Configurable via display.symbols setting.

Also provides safe_print() for encoding-safe output of file paths and
class names read from user projects.
"""

import os
import sys
from dataclasses import dataclass
from typing import Optional

from ..core.patterns import ClassKind


# Common Unicode to ASCII replacements for display
UNICODE_TO_ASCII = {
    '✓': '[OK]',
    '✗': '[X]',
    '⚠': '[!]',
    '→': '->',
    '…': '...',
    '•': '*',
    '├─': '+-',
    '└─': '+-',
}


def safe_print(text: str, end: str = '\n', file=None) -> None:
    """
    Print with graceful encoding fallback.

    Handles UnicodeEncodeError by replacing unencodable characters
    with ASCII equivalents or '?' as last resort.

    Args:
        text: Text to print (may contain any Unicode)
        end: String appended after text (default: newline)
        file: Output stream (default: sys.stdout)
    """
    if file is None:
        file = sys.stdout

    try:
        print(text, end=end, file=file)
    except UnicodeEncodeError:
        safe_text = text
        for unicode_char, ascii_equiv in UNICODE_TO_ASCII.items():
            safe_text = safe_text.replace(unicode_char, ascii_equiv)

        try:
            print(safe_text, end=end, file=file)
        except UnicodeEncodeError:
            # Last resort: replace all unencodable chars with ?
            encoding = getattr(file, 'encoding', 'utf-8') or 'utf-8'
            encoded = safe_text.encode(encoding, errors='replace')
            print(encoded.decode(encoding), end=end, file=file)


@dataclass(frozen=True)
class SymbolSet:
    """Complete set of symbols for result states and structure."""
    # Status markers
    check_pass: str
    check_fail: str
    check_warn: str
    arrow: str

    # Tree/structure markers
    tree_branch: str
    tree_end: str
    bullet: str

    # Text truncation
    ellipsis: str


UNICODE = SymbolSet(
    check_pass='✓',
    check_fail='✗',
    check_warn='⚠',
    arrow='→',
    tree_branch='├─',
    tree_end='└─',
    bullet='•',
    ellipsis='…',
)

ASCII = SymbolSet(
    check_pass='[OK]',
    check_fail='[X]',
    check_warn='[!]',
    arrow='->',
    tree_branch='+-',
    tree_end='+-',
    bullet='*',
    ellipsis='...',
)


def supports_unicode() -> bool:
    """
    Check if environment likely supports Unicode output.

    Conservative: defaults to ASCII if uncertain.
    """
    # Explicit environment override
    if os.environ.get('HCNC_ASCII_ONLY', '').lower() in ('1', 'true', 'yes'):
        return False
    if os.environ.get('HCNC_UNICODE', '').lower() in ('1', 'true', 'yes'):
        return True

    stdout_encoding = getattr(sys.stdout, 'encoding', None)
    if stdout_encoding:
        encoding_lower = stdout_encoding.lower().replace('-', '').replace('_', '')
        if encoding_lower.startswith('utf'):
            return True
        # Windows code pages and 8-bit encodings lack the check marks
        if encoding_lower.startswith('cp') or encoding_lower in ('ascii', 'latin1', 'iso88591'):
            return False

    lang = os.environ.get('LC_ALL', '') or os.environ.get('LANG', '')
    return 'utf-8' in lang.lower() or 'utf8' in lang.lower()


def get_symbols(preference: Optional[str] = None) -> SymbolSet:
    """
    Get appropriate symbol set based on preference or auto-detection.

    Args:
        preference: "unicode", "ascii", or "auto" (None = auto)

    Returns:
        Appropriate SymbolSet for the environment
    """
    if preference == 'unicode':
        return UNICODE
    if preference == 'ascii':
        return ASCII
    return UNICODE if supports_unicode() else ASCII


def format_result_line(symbols: SymbolSet, token: str, valid: bool, kind: Optional[ClassKind]) -> str:
    """
    Format one validated token.

    Examples:
        ✓ card_info (element)
        ✗ card__title
        [OK] UnknownThing (unknown)
    """
    if not valid:
        return f"{symbols.check_fail} {token}"
    label = kind.value if kind else "unknown"
    return f"{symbols.check_pass} {token} ({label})"

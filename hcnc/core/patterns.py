"""
Pattern Library — Compiled grammars for HCNC class names

Defines, as data, the five BEM-family grammars and the utility catalog:
- Block: lowercase/kebab-case (card, button, header-nav)
- Element L1: block_element (card_info, button_icon)
- Element L2: block_element__nested (card_info__title)
- Modifier: block--modifier (card--highlighted, card_info--active)
- State: is/has + PascalCase (isActive, hasError)
- Utility: atomic classes (mt-2, flex, text-sm)

Every grammar is a full-token match. Partial matches never count.

The library is built once at import time (PATTERN_LIBRARY) and never
mutated afterwards, so it can be shared freely across threads.

Usage:
    from hcnc.core.patterns import PATTERN_LIBRARY, PATTERNS

    PATTERN_LIBRARY.grammar(ClassKind.BLOCK).matches("card")   # True
    PATTERN_LIBRARY.is_utility("mt-2")                          # True
    PATTERNS["hcncWithState"]                                   # alternation source
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Pattern, Tuple


class ClassKind(Enum):
    """Closed set of class-name kinds."""
    BLOCK = "block"
    ELEMENT = "element"
    NESTED_ELEMENT = "nested-element"
    MODIFIER = "modifier"
    STATE = "state"
    UTILITY = "utility"

    def __str__(self) -> str:
        return self.value


# JS-compatible semantics: \d and \w are ASCII-only
REGEX_FLAGS = re.ASCII


def compile_grammar(source: str) -> Pattern:
    """Compile a grammar source with the library's flags."""
    return re.compile(source, REGEX_FLAGS)


# =============================================================================
# BEM-family grammar sources
# =============================================================================

# Lowercase alphanumeric groups joined by single hyphens, letter first
_SEGMENT = r"[a-z][a-z0-9]*(?:-[a-z0-9]+)*"

BLOCK_SOURCE = rf"^{_SEGMENT}$"

ELEMENT_SOURCE = rf"^{_SEGMENT}_{_SEGMENT}$"

NESTED_ELEMENT_SOURCE = rf"^{_SEGMENT}_{_SEGMENT}__{_SEGMENT}$"

MODIFIER_SOURCE = (
    rf"^{_SEGMENT}(?:_{_SEGMENT})?(?:__{_SEGMENT})?--{_SEGMENT}$"
)

STATE_SOURCE = r"^(is|has)[A-Z][a-zA-Z0-9]*$"


# =============================================================================
# Utility catalog (Tailwind-like, illustrative, grouped by category)
# =============================================================================

UTILITY_CATALOG: Dict[str, Tuple[str, ...]] = {
    "flexbox": (
        r"^flex$",
        r"^inline-flex$",
        r"^flex-(row|col|wrap|nowrap|1|auto|initial|none)$",
        r"^flex-(row|col)-reverse$",
        r"^items-(start|end|center|baseline|stretch)$",
        r"^justify-(start|end|center|between|around|evenly)$",
        r"^self-(auto|start|end|center|stretch|baseline)$",
        r"^grow(-0)?$",
        r"^shrink(-0)?$",
        r"^order-\d+$",
    ),
    "grid": (
        r"^grid$",
        r"^inline-grid$",
        r"^grid-cols-\d+$",
        r"^grid-rows-\d+$",
        r"^col-span-\d+$",
        r"^row-span-\d+$",
        r"^gap-\d+$",
        r"^gap-x-\d+$",
        r"^gap-y-\d+$",
    ),
    "spacing": (
        r"^[mp][trblxy]?-\d+(\.\d+)?$",
        r"^-[mp][trblxy]?-\d+(\.\d+)?$",
        r"^space-[xy]-\d+$",
        r"^-space-[xy]-\d+$",
    ),
    "sizing": (
        r"^[wh]-(full|screen|auto|min|max|fit|\d+(\.\d+)?|(\d+/\d+))$",
        r"^min-[wh]-(full|screen|0|\d+(\.\d+)?)$",
        r"^max-[wh]-(full|screen|none|\d+(\.\d+)?)$",
        r"^size-\d+$",
    ),
    "typography": (
        r"^text-(xs|sm|base|lg|xl|2xl|3xl|4xl|5xl|6xl|7xl|8xl|9xl)$",
        r"^text-(left|center|right|justify|start|end)$",
        r"^text-\[.+\]$",
        r"^font-(thin|extralight|light|normal|medium|semibold|bold|extrabold|black)$",
        r"^font-(sans|serif|mono)$",
        r"^leading-(none|tight|snug|normal|relaxed|loose|\d+)$",
        r"^tracking-(tighter|tight|normal|wide|wider|widest)$",
        r"^uppercase$",
        r"^lowercase$",
        r"^capitalize$",
        r"^normal-case$",
        r"^italic$",
        r"^not-italic$",
        r"^underline$",
        r"^overline$",
        r"^line-through$",
        r"^no-underline$",
        r"^truncate$",
        r"^whitespace-(normal|nowrap|pre|pre-line|pre-wrap|break-spaces)$",
        r"^break-(normal|words|all|keep)$",
    ),
    "colors": (
        r"^(text|bg|border|ring|shadow)-(transparent|current|inherit)$",
        r"^(text|bg|border|ring)-(black|white)$",
        r"^(text|bg|border|ring)-(slate|gray|zinc|neutral|stone|red|orange|amber"
        r"|yellow|lime|green|emerald|teal|cyan|sky|blue|indigo|violet|purple"
        r"|fuchsia|pink|rose)-\d{2,3}$",
        r"^(text|bg|border|ring)-\[#[0-9a-fA-F]{3,8}\]$",
        r"^(text|bg|border|ring)-\[rgb.+\]$",
    ),
    "backgrounds": (
        r"^bg-(fixed|local|scroll)$",
        r"^bg-(bottom|center|left|left-bottom|left-top|right|right-bottom|right-top|top)$",
        r"^bg-(repeat|no-repeat|repeat-x|repeat-y|repeat-round|repeat-space)$",
        r"^bg-(auto|cover|contain)$",
        r"^bg-gradient-to-(t|tr|r|br|b|bl|l|tl)$",
        r"^from-\w+(-\d+)?$",
        r"^via-\w+(-\d+)?$",
        r"^to-\w+(-\d+)?$",
    ),
    "borders": (
        r"^border(-[trblxy])?(-\d+)?$",
        r"^border-(solid|dashed|dotted|double|hidden|none)$",
        r"^rounded(-[trblxy])?(-none|-sm|-md|-lg|-xl|-2xl|-3xl|-full)?$",
        r"^divide-[xy](-\d+)?$",
        r"^divide-(solid|dashed|dotted|double|none)$",
        r"^ring(-\d+)?$",
        r"^ring-inset$",
        r"^ring-offset-\d+$",
    ),
    "effects": (
        r"^shadow(-sm|-md|-lg|-xl|-2xl|-inner|-none)?$",
        r"^opacity-\d+$",
        r"^mix-blend-\w+$",
        r"^bg-blend-\w+$",
    ),
    "filters": (
        r"^blur(-sm|-md|-lg|-xl|-2xl|-3xl|-none)?$",
        r"^brightness-\d+$",
        r"^contrast-\d+$",
        r"^grayscale(-0)?$",
        r"^hue-rotate-\d+$",
        r"^-hue-rotate-\d+$",
        r"^invert(-0)?$",
        r"^saturate-\d+$",
        r"^sepia(-0)?$",
        r"^drop-shadow(-sm|-md|-lg|-xl|-2xl|-none)?$",
        r"^backdrop-blur(-sm|-md|-lg|-xl|-2xl|-3xl|-none)?$",
    ),
    "layout": (
        r"^block$",
        r"^inline-block$",
        r"^inline$",
        r"^hidden$",
        r"^contents$",
        r"^flow-root$",
        r"^list-item$",
        r"^list-(none|disc|decimal)$",
        r"^float-(left|right|none)$",
        r"^clear-(left|right|both|none)$",
        r"^object-(contain|cover|fill|none|scale-down)$",
        r"^object-(bottom|center|left|left-bottom|left-top|right|right-bottom|right-top|top)$",
        r"^overflow(-[xy])?-(auto|hidden|clip|visible|scroll)$",
        r"^overscroll(-[xy])?-(auto|contain|none)$",
    ),
    "positioning": (
        r"^(static|fixed|absolute|relative|sticky)$",
        r"^(top|right|bottom|left|inset)(-[xy])?-\d+(\.\d+)?$",
        r"^-(top|right|bottom|left|inset)(-[xy])?-\d+(\.\d+)?$",
        r"^(top|right|bottom|left|inset)(-[xy])?-(auto|full|1/2)$",
        r"^z-\d+$",
        r"^z-(auto)$",
        r"^-z-\d+$",
    ),
    "transforms": (
        r"^scale(-[xy])?-\d+$",
        r"^rotate-\d+$",
        r"^-rotate-\d+$",
        r"^translate-[xy]-\d+(\.\d+)?$",
        r"^-translate-[xy]-\d+(\.\d+)?$",
        r"^skew-[xy]-\d+$",
        r"^-skew-[xy]-\d+$",
        r"^origin-(center|top|top-right|right|bottom-right|bottom|bottom-left|left|top-left)$",
        r"^transform$",
        r"^transform-none$",
        r"^transform-gpu$",
    ),
    "transitions": (
        r"^transition(-all|-colors|-opacity|-shadow|-transform|-none)?$",
        r"^duration-\d+$",
        r"^ease-(linear|in|out|in-out)$",
        r"^delay-\d+$",
        r"^animate-(none|spin|ping|pulse|bounce)$",
    ),
    "interactivity": (
        r"^cursor-(auto|default|pointer|wait|text|move|help|not-allowed|none"
        r"|context-menu|progress|cell|crosshair|vertical-text|alias|copy|no-drop"
        r"|grab|grabbing|all-scroll|col-resize|row-resize|n-resize|e-resize"
        r"|s-resize|w-resize|ne-resize|nw-resize|se-resize|sw-resize|ew-resize"
        r"|ns-resize|nesw-resize|nwse-resize|zoom-in|zoom-out)$",
        r"^resize(-none|-x|-y)?$",
        r"^select-(none|text|all|auto)$",
        r"^pointer-events-(none|auto)$",
        r"^touch-(auto|none|pan-x|pan-left|pan-right|pan-y|pan-up|pan-down"
        r"|pinch-zoom|manipulation)$",
        r"^scroll-(auto|smooth)$",
        r"^scroll-[mp][trblxy]?-\d+$",
        r"^snap-(start|end|center|align-none)$",
        r"^snap-(normal|always)$",
        r"^snap-(none|x|y|both|mandatory|proximity)$",
        r"^appearance-none$",
        r"^outline(-none|-dashed|-dotted|-double)?$",
        r"^outline-\d+$",
        r"^outline-offset-\d+$",
        r"^accent-\w+(-\d+)?$",
        r"^caret-\w+(-\d+)?$",
        r"^will-change-(auto|scroll|contents|transform)$",
    ),
    "accessibility": (
        r"^sr-only$",
        r"^not-sr-only$",
        r"^forced-color-adjust-(auto|none)$",
    ),
    "tables": (
        r"^table(-auto|-fixed)?$",
        r"^table-(caption|cell|column|column-group|footer-group|header-group"
        r"|row-group|row)$",
        r"^border-(collapse|separate)$",
        r"^border-spacing(-[xy])?-\d+$",
        r"^caption-(top|bottom)$",
    ),
    "svg": (
        r"^fill-(none|inherit|current|\w+(-\d+)?)$",
        r"^stroke-(none|inherit|current|\w+(-\d+)?)$",
        r"^stroke-\d+$",
    ),
    "aspect-ratio": (
        r"^aspect-(auto|square|video)$",
        r"^aspect-\[\d+/\d+\]$",
    ),
    "columns": (
        r"^columns-\d+$",
        r"^columns-(auto|3xs|2xs|xs|sm|md|lg|xl|2xl|3xl|4xl|5xl|6xl|7xl)$",
        r"^break-(before|after|inside)-(auto|avoid|all|avoid-page|page|left|right|column)$",
    ),
    "box-decoration": (
        r"^box-(border|content)$",
        r"^decoration-(clone|slice)$",
        r"^isolation-(auto|isolate)$",
    ),
    "container": (
        r"^container$",
        r"^mx-auto$",
    ),
    "visibility": (
        r"^visible$",
        r"^invisible$",
        r"^collapse$",
    ),
}


# =============================================================================
# Library entries
# =============================================================================

@dataclass(frozen=True)
class Grammar:
    """
    One compiled grammar plus its kind tag.

    Attributes:
        name: Export name (e.g., "block", "nestedElement", "utility:spacing")
        kind: ClassKind this grammar recognizes
        source: Original pattern source text
        compiled: Compiled pattern (full-token match)
    """
    name: str
    kind: ClassKind
    source: str
    compiled: Pattern = field(repr=False, compare=False)

    def matches(self, token: str) -> bool:
        """Return True if the whole token satisfies this grammar."""
        return self.compiled.fullmatch(token) is not None

    @classmethod
    def build(cls, name: str, kind: ClassKind, source: str) -> "Grammar":
        return cls(name=name, kind=kind, source=source, compiled=compile_grammar(source))


class PatternLibrary:
    """
    Immutable registry of grammars, constructed once and shared by reference.

    Holds one grammar per BEM-family kind and an ordered sequence of
    utility grammars. A utility match on any entry is sufficient.
    """

    def __init__(
        self,
        grammars: Iterable[Grammar],
        utilities: Iterable[Grammar],
    ):
        by_kind: Dict[ClassKind, Grammar] = {}
        for grammar in grammars:
            if grammar.kind in by_kind:
                raise ValueError(f"Duplicate grammar for kind {grammar.kind.value}")
            by_kind[grammar.kind] = grammar

        self._by_kind: Mapping[ClassKind, Grammar] = MappingProxyType(by_kind)
        self._utilities: Tuple[Grammar, ...] = tuple(utilities)

    def grammar(self, kind: ClassKind) -> Grammar:
        """
        Get the grammar for a BEM-family or state kind.

        Raises:
            KeyError: For ClassKind.UTILITY (the utility set is not a single grammar)
        """
        return self._by_kind[kind]

    @property
    def utilities(self) -> Tuple[Grammar, ...]:
        """Builtin utility grammars, in catalog order."""
        return self._utilities

    def categories(self) -> List[str]:
        """Utility categories, in catalog order."""
        seen: List[str] = []
        for grammar in self._utilities:
            category = grammar.name.split(":", 1)[1]
            if category not in seen:
                seen.append(category)
        return seen

    def is_utility(self, token: str, extra: Iterable[Pattern] = ()) -> bool:
        """
        Check a token against builtin utilities plus extra compiled patterns.

        Args:
            token: Candidate class name
            extra: Additional compiled patterns (e.g., from NamingConfig)

        Returns:
            True if any utility grammar matches the whole token
        """
        if any(grammar.matches(token) for grammar in self._utilities):
            return True
        return any(pattern.fullmatch(token) is not None for pattern in extra)

    def find_utility(self, token: str) -> Optional[Grammar]:
        """Return the first builtin utility grammar matching the token, if any."""
        for grammar in self._utilities:
            if grammar.matches(token):
                return grammar
        return None

    def __len__(self) -> int:
        return len(self._by_kind) + len(self._utilities)


def _build_library() -> PatternLibrary:
    grammars = [
        Grammar.build("block", ClassKind.BLOCK, BLOCK_SOURCE),
        Grammar.build("element", ClassKind.ELEMENT, ELEMENT_SOURCE),
        Grammar.build("nestedElement", ClassKind.NESTED_ELEMENT, NESTED_ELEMENT_SOURCE),
        Grammar.build("modifier", ClassKind.MODIFIER, MODIFIER_SOURCE),
        Grammar.build("state", ClassKind.STATE, STATE_SOURCE),
    ]
    utilities = [
        Grammar.build(f"utility:{category}", ClassKind.UTILITY, source)
        for category, sources in UTILITY_CATALOG.items()
        for source in sources
    ]
    return PatternLibrary(grammars, utilities)


PATTERN_LIBRARY = _build_library()


# =============================================================================
# Pattern export surface (for external rule engines)
# =============================================================================

def _alternation(*sources: str) -> str:
    return "(?:" + "|".join(sources) + ")"


PATTERNS: Mapping[str, str] = MappingProxyType({
    "block": BLOCK_SOURCE,
    "element": ELEMENT_SOURCE,
    "nestedElement": NESTED_ELEMENT_SOURCE,
    "modifier": MODIFIER_SOURCE,
    "state": STATE_SOURCE,
    # Any BEM-family kind
    "hcnc": _alternation(
        BLOCK_SOURCE, ELEMENT_SOURCE, NESTED_ELEMENT_SOURCE, MODIFIER_SOURCE,
    ),
    # Any BEM-family kind or state
    "hcncWithState": _alternation(
        BLOCK_SOURCE, ELEMENT_SOURCE, NESTED_ELEMENT_SOURCE, MODIFIER_SOURCE,
        STATE_SOURCE,
    ),
})

# Names used by the GritQL lint rules
GRIT_PATTERNS: Mapping[str, str] = MappingProxyType({
    "validHcncClass": PATTERNS["hcncWithState"],
    "block": PATTERNS["block"],
    "element": PATTERNS["element"],
    "nestedElement": PATTERNS["nestedElement"],
    "modifier": PATTERNS["modifier"],
    "state": PATTERNS["state"],
})

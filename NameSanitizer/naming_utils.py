"""Naming helper utilities (PHP identifier rules).

Convention enforcement and keyword checks shared by the category validators.
"""
import re
import unicodedata
from typing import Optional

from . import naming_config
from .exceptions import EmptyIdentifierError
from .log import RenameLog, format_rename, log_warn
from .transliteration import remove_accents

# PHP keywords, compared case-insensitively
# http://www.php.net/manual/en/reserved.keywords.php
PHP_KEYWORDS = frozenset([
    '__halt_compiler','abstract','and','array','as','break','callable','case','catch','class','clone','const',
    'continue','declare','default','die','do','echo','else','elseif','empty','enddeclare','endfor','endforeach',
    'endif','endswitch','endwhile','eval','exit','extends','float','final','finally','for','foreach','function',
    'global','goto','if','implements','include','include_once','int','instanceof','insteadof','interface','isset',
    'list','namespace','new','or','parent','print','private','protected','public','require','require_once',
    'return','static','string','switch','throw','trait','try','unset','use','var','while','xor','yield'
])

# PHP 把 0x80-0xff 字节都当作标识符字符，对应到 str 上即所有非 ASCII 字符
_EXTENDED = '\x80-\U0010ffff'

_VALID_START = re.compile(r'[A-Za-z_]')
_INVALID_LEADING = re.compile(rf'^[^A-Za-z_{_EXTENDED}]+')
_INVALID_CHARS = re.compile(rf'[^A-Za-z0-9_{_EXTENDED}]+')
_IDENTIFIER = re.compile(rf'[A-Za-z_{_EXTENDED}][A-Za-z0-9_{_EXTENDED}]*')

# 非 ASCII 中的控制符、格式符（零宽、BOM）、各类空白与代理项不算标识符字符
_INVISIBLE_CATEGORIES = frozenset(("Cc", "Cf", "Cs", "Zs", "Zl", "Zp"))


def _is_invisible(char: str) -> bool:
    return char >= "\x80" and unicodedata.category(char) in _INVISIBLE_CATEGORIES


def strip_invisible(text: str) -> str:
    """Drop non-ASCII control, format, separator and surrogate characters."""
    return "".join(c for c in text if not _is_invisible(c))


def is_keyword(name: str) -> bool:
    return name.lower() in PHP_KEYWORDS


def is_valid_php_identifier(name: str, allow_keywords: bool = False) -> bool:
    """Return True if name is a valid PHP identifier.

    Rules:
    - non-empty string
    - starts with A-Za-z, underscore or a non-ASCII character
    - contains only A-Za-z0-9_ or non-ASCII characters thereafter
    - no invisible characters (NBSP, zero-width space, BOM, C1 controls, ...)
    - not a PHP keyword (unless allow_keywords)
    """
    if not isinstance(name, str) or not name:
        return False
    if not _IDENTIFIER.fullmatch(name):
        return False
    if any(_is_invisible(c) for c in name):
        return False
    if not allow_keywords and is_keyword(name):
        return False
    return True


def ucfirst(text: str) -> str:
    """Uppercase the first character when it is an ASCII lowercase letter."""
    if text and 'a' <= text[0] <= 'z':
        return text[0].upper() + text[1:]
    return text


def validate_naming_convention(name) -> str:
    """将任意名称规范化为合法的 PHP 标识符（不检查关键字）。

    1. 去除重音字母 (École -> Ecole)
    2. 首字符不是字母或下划线时加前缀并首字母大写 (1st -> a1st)
    3. 去掉不可见字符（NBSP、零宽空格、BOM、C1 控制符等），再去掉开头残留的非法字符
    4. 去掉其余所有非法字符

    结果为空时抛出 EmptyIdentifierError（仅在前缀被配置为空或非法字符时可能发生）。
    """
    raw = name
    if not isinstance(name, str):
        name = str(name)

    name = remove_accents(name)
    if not _VALID_START.match(name):
        name = naming_config.NAME_PREFIX + ucfirst(name)

    name = strip_invisible(name)
    name = _INVALID_CHARS.sub('', _INVALID_LEADING.sub('', name))
    if not name:
        raise EmptyIdentifierError(raw)
    return name


def report_rename(kind: str, original: str, renamed: str, renames: Optional[RenameLog] = None) -> None:
    """记录一次改名：传入 renames 时只记到调用方的 RenameLog，否则按 WARN_ON_RENAME 直接打印。"""
    if original == renamed:
        return
    if renames is not None:
        renames.record(kind, original, renamed)
    elif naming_config.WARN_ON_RENAME:
        log_warn(format_rename(kind, original, renamed))

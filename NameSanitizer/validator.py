# Author: huhongwei 306463233@qq.com
# MIT License
"""Category validators for names taken from a schema.

Each validator returns a name that can be written into generated PHP as-is.
Classes are kept unique against a caller supplied ``exists`` callback,
operations and constants get a prefix when they clash with a keyword,
attributes are only normalized.
"""
from enum import Enum
from typing import Callable, Iterable, Optional

from . import naming_config
from .log import RenameLog
from .naming_utils import is_keyword, report_rename, ucfirst, validate_naming_convention
from .type_utils import validate_type


class NameCategory(Enum):
    CLASS = "class"
    OPERATION = "operation"
    ATTRIBUTE = "attribute"
    CONSTANT = "constant"
    TYPE = "type"


# ================= 已声明名称登记 =================
class DeclaredNames:
    """已生成/已声明的名称登记表。

    PHP 类名不区分大小写，默认按小写比较。实例可直接作为 validate_class 的
    exists 回调使用。
    """

    def __init__(self, names: Iterable[str] = (), case_sensitive: bool = False):
        self.case_sensitive = case_sensitive
        self._names: set[str] = set()
        for n in names:
            self.declare(n)

    def _key(self, name: str) -> str:
        return name if self.case_sensitive else name.lower()

    def declare(self, name: str) -> str:
        self._names.add(self._key(name))
        return name

    def is_free(self, name: str) -> bool:
        return self._key(name) not in self._names

    def __contains__(self, name: str) -> bool:
        return not self.is_free(name)

    def __call__(self, name: str) -> bool:
        return name in self

    def __len__(self) -> int:
        return len(self._names)


def validate_unique(name: str, is_free: Callable[[str], bool], suffix: Optional[str] = None) -> str:
    """Return the first free candidate for name.

    Without suffix: name, name2, name3, ...
    With suffix:    name, name+suffix, name+suffix+2, name+suffix+3, ...

    No upper bound: is_free must eventually return True.
    """
    i = 1
    new_name = name
    while not is_free(new_name):
        if not suffix:
            new_name = f"{name}{i + 1}"
        elif i == 1:
            new_name = f"{name}{suffix}"
        else:
            new_name = f"{name}{suffix}{i}"
        i += 1
    return new_name


def validate_class(name: str, namespace: Optional[str] = None,
                   exists: Optional[Callable[[str], bool]] = None,
                   renames: Optional[RenameLog] = None) -> str:
    """Validate a class name against PHP naming rules and already declared classes.

    exists receives the fully qualified candidate (``Namespace\\Name``) and
    returns True when something with that name is already declared.
    """
    name = validate_naming_convention(name)
    prefix = f"{namespace}\\" if namespace else ""

    def is_free(candidate: str) -> bool:
        if is_keyword(candidate):
            return False
        return exists is None or not exists(prefix + candidate)

    validated = validate_unique(name, is_free, naming_config.NAME_SUFFIX)
    report_rename("类名", name, validated, renames)
    return validated


def _prefix_keyword(name, kind: str, renames: Optional[RenameLog]) -> str:
    name = validate_naming_convention(name)
    if is_keyword(name):
        renamed = naming_config.NAME_PREFIX + ucfirst(name)
        report_rename(kind, name, renamed, renames)
        return renamed
    return name


def validate_operation(name: str, renames: Optional[RenameLog] = None) -> str:
    return _prefix_keyword(name, "方法名", renames)


def validate_constant(name: str, renames: Optional[RenameLog] = None) -> str:
    return _prefix_keyword(name, "常量名", renames)


def validate_attribute(name: str) -> str:
    # 属性名可以与关键字相同（$this->class 合法），只做命名规范化
    return validate_naming_convention(name)


def validate_name(name: str, category, namespace: Optional[str] = None,
                  exists: Optional[Callable[[str], bool]] = None,
                  renames: Optional[RenameLog] = None) -> str:
    """按类别校验名称；category 可为 NameCategory 或其字符串值。"""
    category = NameCategory(category)
    if category is NameCategory.CLASS:
        return validate_class(name, namespace, exists, renames)
    if category is NameCategory.OPERATION:
        return validate_operation(name, renames)
    if category is NameCategory.ATTRIBUTE:
        return validate_attribute(name)
    if category is NameCategory.CONSTANT:
        return validate_constant(name, renames)
    return validate_type(name, renames)

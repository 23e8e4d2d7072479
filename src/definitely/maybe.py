# src/definitely/maybe.py
"""값의 존재/부재를 안전하게 표현하는 `Maybe` 컨테이너.

개요:
    `None`을 "값 없음"의 표시로 쓰는 대신, 부재(`Unknown`)와 존재(`Definite`)를
    **값**으로 구분합니다. 값은 안전한 접근 연산(반복, `otherwise`, `to`, `query`)
    을 통해서만 꺼낼 수 있으며, 부재 때문에 실패하는 연산은 제공하지 않습니다.

특징:
    * 불변: 어떤 연산도 기존 인스턴스를 바꾸지 않습니다.
    * 총함수: 사용자 콜백(`to`/`query`/`and_then`)의 예외만 그대로 전파됩니다.
    * 시퀀스 뷰: `Unknown`은 0개, `Definite(v)`는 `v` 1개를 내는 이터러블입니다.

예시:
    >>> from itertools import chain
    >>> list(chain.from_iterable([unknown(), definitely("a"), unknown(), definitely("b")]))
    ['a', 'b']
    >>> unknown().otherwise(unknown()).otherwise(7)
    7
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar, cast, overload

TValue = TypeVar("TValue")
TNewValue = TypeVar("TNewValue")

__all__ = ["Maybe", "Definite", "Unknown", "unknown", "definitely"]


class Maybe(Generic[TValue], ABC):
    """값이 있을 수도, 없을 수도 있음을 표현하는 불변 컨테이너.

    제공 기능:
    - 상태 질의: is_definite(), is_unknown()
    - 시퀀스 뷰: iter() → 0개 또는 1개
    - 기본값: otherwise(), otherwise_value(), otherwise_maybe()
    - 변환: to(), query()
    - 체이닝: and_then() (flatMap)
    - 보조(interop): to_optional(), from_optional()

    Type Parameters:
        TValue: 존재하는 값의 타입.
    """

    __slots__ = ()

    # ── 상태 질의 ────────────────────────────────────────────────────────────
    @abstractmethod
    def is_definite(self) -> bool:
        """값이 존재하는지 여부.

        Returns:
            bool: Definite면 True, Unknown이면 False.
        """
        ...

    def is_unknown(self) -> bool:
        """값이 부재인지 여부.

        Returns:
            bool: Unknown이면 True, 아니면 False.
        """
        return not self.is_definite()

    # ── 시퀀스 뷰 ────────────────────────────────────────────────────────────
    @abstractmethod
    def __iter__(self) -> Iterator[TValue]:
        """값을 0개 또는 1개 내는 새 이터레이터를 반환합니다.

        호출할 때마다 처음부터 다시 순회합니다.
        """
        ...

    # ── 기본값 ───────────────────────────────────────────────────────────────
    @abstractmethod
    def otherwise_value(self, default: TValue) -> TValue:
        """값을 꺼내거나 기본값을 반환합니다.

        Args:
            default: 비어있을 때 반환할 기본값.

        Returns:
            TValue: 값 또는 기본값.
        """
        ...

    @abstractmethod
    def otherwise_maybe(self, fallback: "Maybe[TValue]") -> "Maybe[TValue]":
        """비어있을 때만 다른 `Maybe`로 대체합니다.

        Args:
            fallback: 비어있을 때 그대로 반환할 `Maybe`.

        Returns:
            Maybe[TValue]: Definite면 자기 자신, Unknown이면 `fallback`.
        """
        ...

    @overload
    def otherwise(self, default: "Maybe[TValue]") -> "Maybe[TValue]": ...

    @overload
    def otherwise(self, default: TValue) -> TValue: ...

    def otherwise(self, default: Any) -> Any:
        """인자 타입에 따라 `otherwise_maybe` 또는 `otherwise_value`로 위임합니다.

        왼쪽부터 평가되므로 연쇄 호출은 처음 만나는 Definite 값으로 결정됩니다.

        Args:
            default: 기본값 또는 대체 `Maybe`.

        Returns:
            `default`가 `Maybe`이면 Maybe[TValue], 아니면 TValue.

        Examples:
            >>> unknown().otherwise(definitely(1)).otherwise(2)
            1
            >>> definitely(3).otherwise(unknown())
            Definite(_value=3)

        Notes:
            - `Maybe[Maybe[...]]`처럼 값 자체가 `Maybe`인 경우 의도가 모호하므로
              `otherwise_value`/`otherwise_maybe`를 직접 호출하세요.
        """
        if isinstance(default, Maybe):
            return self.otherwise_maybe(default)
        return self.otherwise_value(default)

    # ── 변환 ─────────────────────────────────────────────────────────────────
    @abstractmethod
    def to(self, mapping: Callable[[TValue], TNewValue]) -> "Maybe[TNewValue]":
        """값이 있을 때만 변환합니다.

        `mapping`은 값이 있을 때 한 번만 호출되며, 발생한 예외는 그대로 전파됩니다.

        Args:
            mapping: TValue → TNewValue 함수.

        Returns:
            Maybe[TNewValue]: 변환된 maybe, 값이 없으면 Unknown.
        """
        ...

    def query(self, predicate: Callable[[TValue], bool]) -> "Maybe[bool]":
        """값이 있을 때만 조건을 평가합니다.

        값이 없으면 `definitely(False)`가 아니라 Unknown을 반환합니다.
        "모른다"와 "거짓이다"는 서로 다른 결과입니다.

        Args:
            predicate: TValue → bool 함수.

        Returns:
            Maybe[bool]: 평가 결과, 값이 없으면 Unknown.

        Examples:
            >>> definitely(4).query(lambda x: x > 5)
            Definite(_value=False)
            >>> unknown().query(lambda x: x > 5)
            Unknown
        """
        return self.to(predicate)

    @abstractmethod
    def and_then(self, f: Callable[[TValue], "Maybe[TNewValue]"]) -> "Maybe[TNewValue]":
        """값이 있을 때만 Maybe를 반환하는 계산을 연결합니다.

        Args:
            f: TValue → Maybe[TNewValue] 함수.

        Returns:
            Maybe[TNewValue]: 함수의 반환값 또는 Unknown.
        """
        ...

    # ── 보조(interop) ────────────────────────────────────────────────────────
    def to_optional(self) -> Optional[TValue]:
        """Optional로 변환합니다.

        `definitely(None)`과 Unknown은 둘 다 None이 되므로 구분이 사라집니다.

        Returns:
            Optional[TValue]: Definite(v) → v, Unknown → None.
        """
        return cast(Optional[TValue], self.otherwise_value(cast(TValue, None)))

    @staticmethod
    def from_optional(value: Optional[TValue]) -> "Maybe[TValue]":
        """옵셔널 값을 Maybe로 승격합니다.

        Args:
            value: 옵셔널 값.

        Returns:
            Maybe[TValue]: 값이 있으면 Definite(value), 없으면 Unknown.
        """
        return Definite(_value=value) if value is not None else Unknown


@dataclass(frozen=True, slots=True, kw_only=True)
class Definite(Maybe[TValue]):
    """값이 존재함을 나타내는 `Maybe`의 변형.

    동등성은 값 기반입니다. `Definite(_value=v1) == Definite(_value=v2)`는
    `v1 == v2`와 같습니다. 값이 다시 `Maybe`여도 자동으로 펼치지 않습니다.

    Attributes:
        _value: 담긴 실제 값.

    Examples:
        >>> definitely(21).to(lambda x: x * 2)
        Definite(_value=42)
        >>> list(definitely("x"))
        ['x']
        >>> definitely(1).otherwise(999)
        1

    Notes:
        - 생성자는 `kw_only=True`이므로 `Definite(_value=42)`로 호출하거나
          `definitely(42)`를 사용하세요.
    """

    _value: TValue

    def is_definite(self) -> bool:
        return True

    def __iter__(self) -> Iterator[TValue]:
        yield self._value

    def otherwise_value(self, default: TValue) -> TValue:
        return self._value

    def otherwise_maybe(self, fallback: "Maybe[TValue]") -> "Maybe[TValue]":
        return self

    def to(self, mapping: Callable[[TValue], TNewValue]) -> "Maybe[TNewValue]":
        return Definite(_value=mapping(self._value))

    def and_then(self, f: Callable[[TValue], "Maybe[TNewValue]"]) -> "Maybe[TNewValue]":
        return f(self._value)


class _Unknown(Maybe[Any]):
    """값의 부재를 나타내는 `Maybe`의 내부 싱글턴 변형.

    이 클래스의 인스턴스는 모듈 하단에 `Unknown` 상수로 **하나만** 노출됩니다.
    `to`/`query`/`and_then`은 콜백을 호출하지 않고 자신을 그대로 반환합니다.

    Examples:
        >>> list(Unknown)
        []
        >>> Unknown.to(lambda x: x * 2)
        Unknown
        >>> Unknown.otherwise(123)
        123
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return "Unknown"

    def __reduce__(self) -> str:
        # 복사/피클 후에도 싱글턴 유지
        return "Unknown"

    def is_definite(self) -> bool:
        return False

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def otherwise_value(self, default):
        return default

    def otherwise_maybe(self, fallback):
        return fallback

    def to(self, mapping, /):
        return self

    def and_then(self, f, /):
        return self


Unknown: Maybe[Any] = _Unknown()


def unknown() -> Maybe[Any]:
    """값이 없음을 나타내는 `Maybe`를 반환합니다.

    Returns:
        Maybe[Any]: 항상 `Unknown` 싱글턴.
    """
    return Unknown


def definitely(value: TValue) -> Maybe[TValue]:
    """값 `value`를 담은 `Maybe`를 만듭니다.

    `None`을 넘기는 것은 호출자 계약 위반이지만 검사하지 않습니다.
    `None`일 수 있는 값은 `Maybe.from_optional()`로 승격하세요.

    Args:
        value: 담을 값.

    Returns:
        Maybe[TValue]: `Definite(_value=value)`.
    """
    return Definite(_value=value)

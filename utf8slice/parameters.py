"""
Typed, namespaced program configuration loaded from YAML.

Parameter names may be dotted to reach into nested namespaces:
``params.string("logging.root_level")`` looks up ``root_level`` in the ``logging`` namespace.
"""
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Type, TypeVar, Union

from attr import attrib, attrs

from immutablecollections import ImmutableDict, immutabledict
from immutablecollections.converter_utils import _to_tuple

from utf8slice.preconditions import check_arg, check_isinstance

import yaml


class ParameterError(Exception):
    pass


_T = TypeVar("_T")  # pylint:disable=invalid-name

# distinguishes an absent parameter from one whose value is None
_ABSENT = object()


@attrs(frozen=True, slots=True)
class Parameters:
    """
    An immutable tree of named configuration values.

    Leaves are plain YAML values; interior nodes are nested `Parameters` (namespaces).
    Accessors check types and raise `ParameterError` with the full parameter name on failure.
    Use ``name in params`` to test whether a lookup would succeed.
    """

    _data: ImmutableDict[str, Any] = attrib(
        default=immutabledict(), converter=immutabledict
    )
    namespace_prefix: Tuple[str, ...] = attrib(
        default=tuple(), converter=_to_tuple, kw_only=True
    )

    def __attrs_post_init__(self) -> None:
        for key in self._data:
            check_arg(
                "." not in key, "Parameter name %s contains the namespace separator", (key,)
            )

    @staticmethod
    def empty() -> "Parameters":
        return Parameters()

    @staticmethod
    def from_mapping(
        mapping: Mapping, *, namespace_prefix: Iterable[str] = tuple()
    ) -> "Parameters":
        """
        Build `Parameters` from nested mappings; every mapping value becomes a namespace.
        """
        check_isinstance(mapping, Mapping)
        prefix = tuple(namespace_prefix)
        return Parameters(
            (
                (
                    key,
                    Parameters.from_mapping(val, namespace_prefix=prefix + (key,))
                    if isinstance(val, Mapping)
                    else val,
                )
                for (key, val) in mapping.items()
            ),
            namespace_prefix=prefix,
        )

    @staticmethod
    def from_key_value_pairs(kv_pairs: Iterable[Tuple[str, Any]]) -> "Parameters":
        """
        Build `Parameters` from ``(dotted_name, value)`` pairs, such as command-line overrides.

        String values which YAML reads as integers or booleans are converted,
        so ``("begin", "3")`` gives an integer parameter.
        """
        nested: Dict[str, Any] = {}
        for (name, value) in kv_pairs:
            if not name:
                raise RuntimeError("Parameter names cannot be the empty string")
            *namespaces, leaf = name.split(".")
            target = nested
            for namespace in namespaces:
                target = target.setdefault(namespace, {})
            target[leaf] = _scalar_from_string(value)
        return Parameters.from_mapping(nested)

    def as_nested_dicts(self) -> Dict[str, Any]:
        return {
            key: val.as_nested_dicts() if isinstance(val, Parameters) else val
            for (key, val) in self._data.items()
        }

    def unify(self, overrides: Union[Mapping[str, Any], "Parameters"]) -> "Parameters":
        """
        Get these parameters with *overrides* applied on top.

        Namespaces present on both sides are merged recursively; for leaves, *overrides* wins.
        A name which is a namespace on one side and a leaf on the other is an error.
        """
        if not isinstance(overrides, Parameters):
            overrides = Parameters.from_mapping(overrides)

        merged = dict(self._data)
        for (key, new_val) in overrides._data.items():  # pylint:disable=protected-access
            old_val = merged.get(key, _ABSENT)
            if old_val is _ABSENT:
                merged[key] = new_val
            elif isinstance(old_val, Parameters) and isinstance(new_val, Parameters):
                merged[key] = old_val.unify(new_val)
            elif isinstance(old_val, Parameters) or isinstance(new_val, Parameters):
                raise ParameterError(
                    f"Cannot unify {self._full_name(key)}: it is a namespace on one side "
                    f"and a parameter on the other"
                )
            else:
                merged[key] = new_val
        return Parameters(merged, namespace_prefix=self.namespace_prefix)

    def __contains__(self, name: str) -> bool:
        return self._lookup(name) is not _ABSENT

    def get(self, name: str, param_type: Type[_T], *, default: Optional[_T] = None) -> _T:
        """
        Get parameter *name*, which must be an instance of *param_type*.

        An absent parameter yields *default* if one is given and is an error otherwise.
        """
        ret = self._lookup(name)
        if ret is _ABSENT:
            if default is not None:
                return default
            raise ParameterError(
                f"Missing parameter {self._full_name(name)}. Available here: "
                f"{sorted(self._data.keys())}"
            )
        if not isinstance(ret, param_type):
            raise ParameterError(
                f"Expected parameter {self._full_name(name)} to be of type "
                f"{param_type.__name__} but got {ret!r}"
            )
        return ret

    def namespace(self, name: str) -> "Parameters":
        return self.get(name, Parameters)

    def string(self, name: str, *, default: Optional[str] = None) -> str:
        return self.get(name, str, default=default)

    def integer(self, name: str, *, default: Optional[int] = None) -> int:
        ret = self.get(name, int, default=default)
        # YAML `true` is an int to Python but never a sensible integer parameter
        if isinstance(ret, bool):
            raise ParameterError(
                f"Expected parameter {self._full_name(name)} to be an integer "
                f"but got boolean {ret}"
            )
        return ret

    def non_negative_integer(self, name: str, *, default: Optional[int] = None) -> int:
        ret = self.integer(name, default=default)
        if ret < 0:
            raise ParameterError(
                f"Expected parameter {self._full_name(name)} to be a non-negative integer "
                f"but got {ret}"
            )
        return ret

    def optional_non_negative_integer(self, name: str) -> Optional[int]:
        return self.non_negative_integer(name) if name in self else None

    def existing_file(self, name: str) -> Path:
        """
        Get parameter *name* as the resolved path of a file which must already exist.
        """
        path = Path(self.string(name)).resolve()
        if not path.is_file():
            problem = "is not a file" if path.exists() else "does not exist"
            raise ParameterError(
                f"Expected parameter {self._full_name(name)} to name an existing file, "
                f"but {path} {problem}"
            )
        return path

    def optional_creatable_file(self, name: str) -> Optional[Path]:
        """
        Get parameter *name* as a resolved file path, creating its parent directories.

        Returns `None` if the parameter is absent.
        """
        if name not in self:
            return None
        path = Path(self.string(name)).resolve()
        path.parent.mkdir(parents=True, exist_ok=True)
        return path

    def _lookup(self, name: str) -> Any:
        check_isinstance(name, str)
        current: Any = self
        for component in name.split("."):
            if not isinstance(current, Parameters):
                return _ABSENT
            current = current._data.get(  # pylint:disable=protected-access
                component, _ABSENT
            )
            if current is _ABSENT:
                return _ABSENT
        return current

    def _full_name(self, name: str) -> str:
        return ".".join(self.namespace_prefix + (name,))

    def __str__(self) -> str:
        return yaml.safe_dump(
            _to_yaml_friendly(self.as_nested_dicts()),
            default_flow_style=False,
            indent=4,
            width=78,
            sort_keys=False,
        )


def _scalar_from_string(value: Any) -> Any:
    if isinstance(value, str):
        try:
            parsed = yaml.safe_load(value)
        except yaml.YAMLError:
            return value
        if isinstance(parsed, (bool, int)):
            return parsed
    return value


def _to_yaml_friendly(node: Any) -> Any:
    if isinstance(node, Path):
        return str(node)
    if isinstance(node, Mapping):
        return {k: _to_yaml_friendly(v) for (k, v) in node.items()}
    if isinstance(node, (list, tuple)):
        return [_to_yaml_friendly(item) for item in node]
    return node


@attrs(frozen=True, slots=True)
class YAMLParametersLoader:
    """
    Loads `Parameters` from YAML whose top level is a mapping with string keys throughout.
    """

    def load(self, path: Union[str, Path]) -> Parameters:
        path = Path(path)
        return self._load(path.read_text(encoding="utf-8"), source=str(path))

    def load_string(self, content: str) -> Parameters:
        return self._load(content, source="<string>")

    def _load(self, content: str, *, source: str) -> Parameters:
        try:
            raw = yaml.safe_load(content)
            check_arg(
                isinstance(raw, Mapping),
                "Parameter files must hold a mapping at the top level",
            )
            _check_keys_are_strings(raw, ())
            return Parameters.from_mapping(raw)
        except Exception as e:
            raise IOError(f"Failure while loading parameter file {source}") from e


def _check_keys_are_strings(mapping: Mapping, path: Tuple[str, ...]) -> None:
    for (key, val) in mapping.items():
        if not isinstance(key, str):
            context = ".".join(path) or "the root namespace"
            raise ParameterError(f"Non-string key {key!r} in {context}")
        if isinstance(val, Mapping):
            _check_keys_are_strings(val, path + (key,))

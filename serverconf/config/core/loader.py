"""
Configuration loader.

Resolves a fixed table of parameter declarations against a provider and
produces a read-only Configuration, or fails on the first missing or
invalid parameter.
"""

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Sequence, Tuple

from .parameter import ParameterSpec
from .provider import ConfigProvider
from .validator import ParameterError, ValidationError, ValidationResult
from serverconf.logger import get_serverconf_logger


class Configuration(Mapping[str, str]):
    """Validated, read-only view of the loaded parameter values."""

    def __init__(self, values: Mapping[str, str]):
        self._values = MappingProxyType(dict(values))

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self):
        # Values may be secrets
        return f"Configuration(keys={sorted(self._values)})"


class ConfigurationLoader:
    """
    Loads startup parameters from a provider.

    Each spec is checked in declaration order: a missing required key
    raises ParameterError, a present value runs through every attached
    validator and the first failure raises ValidationError.
    """

    def __init__(self, specs: Iterable[ParameterSpec]):
        self.specs: Sequence[ParameterSpec] = tuple(specs)
        self.logger = get_serverconf_logger("ConfigurationLoader")

        seen = set()
        for spec in self.specs:
            if spec.key in seen:
                raise ValueError(f"Duplicate parameter declaration: {spec.key}")
            seen.add(spec.key)

    def check(self, provider: ConfigProvider, fail_fast: bool = True) -> ValidationResult:
        """
        Validate all declared parameters against a provider.

        Args:
            provider: Source of raw values
            fail_fast: Stop at the first failing parameter. When False, every
                parameter is checked and one error per failing parameter is
                collected.

        Returns:
            ValidationResult with the errors found, empty when valid
        """
        result, _ = self._resolve(provider, fail_fast)
        return result

    def load(self, provider: ConfigProvider, fail_fast: bool = True) -> Configuration:
        """
        Load and validate all declared parameters.

        Each key is read from the provider once; the Configuration holds
        exactly the values that were validated.

        Raises:
            ParameterError: A required parameter is not supplied
            ValidationError: A supplied value failed validation
        """
        result, values = self._resolve(provider, fail_fast)
        if not result.is_valid:
            self.logger.error("Configuration load failed",
                              domain=provider.domain,
                              errors=[e.message for e in result.errors])
            result.raise_for_errors()

        self.logger.info("Configuration loaded", domain=provider.domain, parameters=sorted(values))
        return Configuration(values)

    def _resolve(self, provider: ConfigProvider, fail_fast: bool) -> Tuple[ValidationResult, Dict[str, str]]:
        result = ValidationResult()
        values: Dict[str, str] = {}
        for spec in self.specs:
            value = provider.get(spec.key)
            error = self._check_parameter(spec, value)
            if error is not None:
                result.add_error(error)
                if fail_fast:
                    break
            elif value is not None:
                values[spec.key] = value
        return result, values

    def _check_parameter(self, spec: ParameterSpec, value: Optional[str]):
        if value is None:
            if spec.required:
                return ParameterError.missing(spec.key)
            self.logger.debug("Optional parameter not set", parameter=spec.key)
            return None

        for validator in spec.validators:
            try:
                validator.validate(spec.key, value)
            except ValidationError as e:
                return e

        self.logger.debug("Parameter validated", parameter=spec.key,
                          validators=[type(v).__name__ for v in spec.validators])
        return None

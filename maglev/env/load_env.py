import os
from typing import Callable, Dict, TypeVar, Union

from dotenv import dotenv_values
from pydantic import BaseModel

from .env import Env

T = TypeVar("T", bound=BaseModel)

PrimaryType = Union[str, int, bool, float, bytes]


def load_env(default: type[Env], env_file: str = None, override: T | None = None) -> T:
    """
    Build settings from, in increasing precedence: process environment
    variables, the env file (".env" in the working directory unless
    given), and the fields explicitly set on override.
    """
    envars = default.types_map()

    if env_file is None:
        env_file = ".env"

    values: Dict[str, PrimaryType] = _from_environment(envars)

    if env_file and os.path.exists(env_file):
        values.update(_from_env_file(env_file, envars))

    if override:
        values.update(override.model_dump(exclude_unset=True, exclude_none=True))
        default = type(override)

    return default(**values)


def _from_environment(
    envars: Dict[str, Callable[[str], PrimaryType]],
) -> Dict[str, PrimaryType]:
    values: Dict[str, PrimaryType] = {}
    for envar_name, envar_type in envars.items():
        envar_value = os.getenv(envar_name)
        if envar_value:
            values[envar_name] = envar_type(envar_value)

    return values


def _from_env_file(
    env_file: str,
    envars: Dict[str, Callable[[str], PrimaryType]],
) -> Dict[str, PrimaryType]:
    values: Dict[str, PrimaryType] = {}
    for envar_name, envar_value in dotenv_values(dotenv_path=env_file).items():
        envar_type = envars.get(envar_name)
        if envar_type and envar_value:
            values[envar_name] = envar_type(envar_value)

    return values

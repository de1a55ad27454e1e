"""Configuration helpers shared across jsontree-view packages."""

from jv_common.config.env import parse_bool_env, parse_int_env, parse_str_env

__all__ = ["parse_bool_env", "parse_int_env", "parse_str_env"]

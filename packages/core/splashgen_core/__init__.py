"""Core services: settings, logging, Cordova preferences, output paths, and the splash pipeline."""

from .config import SplashgenConfig, config_path, load_config, save_config
from .logging_setup import configure_logging, get_logger
from .pipeline import SUPPORTED_PLATFORMS, PipelineReport, SplashPipeline
from .preferences import (
    GRADIENT_PREFERENCE,
    gradient_preferences,
    read_build_config_preference,
    read_preference,
    resolve_gradient_preference,
)
from .project import OutputPaths, android_res_dir, ios_assets_dir, resolve_output_paths

__all__ = [
    "GRADIENT_PREFERENCE",
    "OutputPaths",
    "PipelineReport",
    "SUPPORTED_PLATFORMS",
    "SplashPipeline",
    "SplashgenConfig",
    "android_res_dir",
    "config_path",
    "configure_logging",
    "get_logger",
    "gradient_preferences",
    "ios_assets_dir",
    "load_config",
    "read_build_config_preference",
    "read_preference",
    "resolve_gradient_preference",
    "resolve_output_paths",
    "save_config",
]

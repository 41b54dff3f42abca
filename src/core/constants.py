"""Core constants used across modmatrix modules.

This module centralizes file names, thresholds, and module ids.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_PROJECT_ROOT = Path(".")
DEFAULT_MATRIX_FILE_NAME = "versions-matrix.yaml"
DEFAULT_PROPERTIES_FILE_NAME = "gradle.properties"
DEFAULT_OUTPUT_DIR_NAME = "outputs"
DEFAULT_TARGET_VERSION = "1.20.4"
NEOFORGE_THRESHOLD_VERSION = "1.20.4"
DEFAULT_JVM_VERSION = "17"
DEFAULT_ARTIFACT_EXTENSION = "jar"

TARGET_VERSION_PROPERTY = "minecraft_version"
ENABLED_PLATFORMS_PROPERTY = "enabled_platforms"
MOD_VERSION_PROPERTY = "mod_version"
ARCHIVES_BASE_NAME_PROPERTY = "archives_base_name"
MAVEN_GROUP_PROPERTY = "maven_group"
JVM_VERSION_PARAMETER = "jvm_version"

COMMON_MODULE_ID = ":common"
SDK_MODULE_ID = ":botSdk"
SDK_MODULE_DIR = "botSdk"
SDK_BOT_MODULE_ID = ":botSdk:common-Bot"
SDK_BOT_MODULE_DIR = "botSdk/common/Bot"
BUILD_DIR_NAME = "build"
BUILD_LIBS_DIR_NAME = "libs"

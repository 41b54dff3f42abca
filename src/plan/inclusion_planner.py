"""Build module inclusion planning.

This module maps a platform set onto the build modules to activate.
Planning is a pure function of the platform set and runs before any
project graph exists, so it never probes the filesystem.
"""

from __future__ import annotations

from core.constants import (
    COMMON_MODULE_ID,
    SDK_BOT_MODULE_DIR,
    SDK_BOT_MODULE_ID,
    SDK_MODULE_DIR,
    SDK_MODULE_ID,
)
from core.errors import ModMatrixPlanError
from core.types import ModuleInclusion, ModulePlan, PlatformId
from plan.platform_profiles import get_platform_profile

_EXCLUSIVE_LOADERS = ("forge", "neoforge")


def plan_modules(platforms: frozenset[PlatformId]) -> ModulePlan:
    """Plan build modules for a platform set.

    Args:
        platforms: Selected platforms.

    Returns:
        Common, fabric, the selected forge-family loader, and the SDK modules.

    Raises:
        ModMatrixPlanError: If fabric is missing or not exactly one of
            forge and neoforge is selected.
    """
    for platform in platforms:
        get_platform_profile(platform)
    if "fabric" not in platforms:
        raise ModMatrixPlanError(
            "Platform set must include fabric; the fabric module is always built."
        )
    selected_loaders = [loader for loader in _EXCLUSIVE_LOADERS if loader in platforms]
    if len(selected_loaders) != 1:
        raise ModMatrixPlanError(
            "Platform set must include exactly one of forge and neoforge, "
            f"got: {', '.join(selected_loaders) or 'neither'}."
        )
    fabric_profile = get_platform_profile("fabric")
    loader_profile = get_platform_profile(selected_loaders[0])
    modules = (
        ModuleInclusion(module_id=COMMON_MODULE_ID, project_dir=COMMON_MODULE_ID.lstrip(":")),
        ModuleInclusion(module_id=fabric_profile.module_id, project_dir=fabric_profile.project_dir),
        ModuleInclusion(module_id=loader_profile.module_id, project_dir=loader_profile.project_dir),
        ModuleInclusion(module_id=SDK_MODULE_ID, project_dir=SDK_MODULE_DIR),
        ModuleInclusion(module_id=SDK_BOT_MODULE_ID, project_dir=SDK_BOT_MODULE_DIR),
    )
    return ModulePlan(modules=modules)


def render_gradle_includes(plan: ModulePlan) -> list[str]:
    """Render a settings-script include block for a module plan.

    Modules whose directory differs from the default derived from the
    id also get an explicit ``projectDir`` line.
    """
    lines = []
    for module in plan.modules:
        lines.append(f'include("{module.module_id}")')
        if module.project_dir != module.module_id.lstrip(":").replace(":", "/"):
            lines.append(
                f'project("{module.module_id}").projectDir = file("./{module.project_dir}")'
            )
    return lines

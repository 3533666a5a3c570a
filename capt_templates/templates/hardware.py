"""Rufio hardware job: power off, one-time PXE boot, power on."""

from __future__ import annotations

import logging

from capt_templates.render.renderer import render_template
from capt_templates.templates.models import HardwareProvisionTasks

logger = logging.getLogger(__name__)

HARDWARE_PROVISION_TASKS = """
- powerAction: "off"
- oneTimeBootDeviceAction:
    device:
    - pxe
    efiBoot: {{.efi_boot}}
- powerAction: "on"
"""


def render_hardware_tasks(tasks: HardwareProvisionTasks) -> str:
    """Render the three-step power/boot job for *tasks*."""
    logger.debug("Rendering hardware provision tasks (efi_boot=%s)", tasks.efi_boot)
    return render_template(HARDWARE_PROVISION_TASKS, {"efi_boot": tasks.efi_boot})

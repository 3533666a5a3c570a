"""Fixed workflow and hardware job templates for CAPT machines."""

from capt_templates.templates.hardware import (
    HARDWARE_PROVISION_TASKS,
    render_hardware_tasks,
)
from capt_templates.templates.models import (
    DEFAULT_DEVICE_TEMPLATE_NAME,
    HardwareProvisionTasks,
    WorkflowTemplate,
)
from capt_templates.templates.workflow import (
    WORKFLOW_ACTION_NAMES,
    WORKFLOW_TEMPLATE,
    render_workflow,
)

__all__ = [
    "DEFAULT_DEVICE_TEMPLATE_NAME",
    "HARDWARE_PROVISION_TASKS",
    "HardwareProvisionTasks",
    "WORKFLOW_ACTION_NAMES",
    "WORKFLOW_TEMPLATE",
    "WorkflowTemplate",
    "render_hardware_tasks",
    "render_workflow",
]

"""Pydantic value objects describing what to render.

Both models are immutable.  Fields accept either their snake_case name or
the CamelCase alias used by the provisioning controller, e.g.::

    WorkflowTemplate.model_validate({"Name": "m1", "ImageURL": "http://x/img"})
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

#: Worker placeholder used when no device template name is given.  It is
#: left unresolved for a second templating pass downstream.
DEFAULT_DEVICE_TEMPLATE_NAME: str = "{{.device_1}}"


class WorkflowTemplate(BaseModel):
    """Inputs for the machine provisioning workflow.

    Attributes:
        name: Workflow name, also used as the single task name.  Required.
        metadata_url: URL written into the cloud-init Ec2 datasource.
        image_url: URL of the disk image to stream.  Required.
        dest_disk: Device path the whole-disk image is written to.
        dest_partition: Device path of the root partition.
        device_template_name: Worker the task runs on.  Empty means
            :data:`DEFAULT_DEVICE_TEMPLATE_NAME`.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(default="", alias="Name")
    metadata_url: str = Field(default="", alias="MetadataURL")
    image_url: str = Field(default="", alias="ImageURL")
    dest_disk: str = Field(default="", alias="DestDisk")
    dest_partition: str = Field(default="", alias="DestPartition")
    device_template_name: str = Field(default="", alias="DeviceTemplateName")

    @property
    def effective_device_template_name(self) -> str:
        return self.device_template_name or DEFAULT_DEVICE_TEMPLATE_NAME


class HardwareProvisionTasks(BaseModel):
    """Inputs for the Rufio power/boot job."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    efi_boot: bool = Field(default=False, alias="EFIBoot")

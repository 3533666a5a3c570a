"""Tinkerbell provisioning workflow rendering.

The workflow streams the OS image to disk, creates the ``tink`` user,
installs a one-shot cluster setup script and its systemd unit, writes the
cloud-init configuration and finally kexecs into the new root.  Action
order matters and is fixed.
"""

from __future__ import annotations

import logging
from typing import Tuple

from capt_templates.errors import MissingImageURLError, MissingNameError
from capt_templates.render.renderer import render_template
from capt_templates.templates.models import WorkflowTemplate

logger = logging.getLogger(__name__)

#: Action names in the order they run.
WORKFLOW_ACTION_NAMES: Tuple[str, ...] = (
    "stream-image",
    "create-user",
    "create-init-script",
    "create-init-script-service",
    "enable-init-script",
    "add-tink-cloud-init-config",
    "add-tink-cloud-init-ds-config",
    "kexec-image",
)

WORKFLOW_TEMPLATE = """
version: "0.1"
name: {{.name}}
global_timeout: 6000
tasks:
  - name: "{{.name}}"
    worker: "{{.device_template_name}}"
    volumes:
      - /dev:/dev
      - /dev/console:/dev/console
      - /lib/firmware:/lib/firmware:ro
    actions:
      - name: "stream-image"
        image: quay.io/tinkerbell-actions/image2disk:v1.0.0
        timeout: 600
        environment:
          IMG_URL: {{.image_url}}
          DEST_DISK: {{.dest_disk}}
          COMPRESSED: true
      - name: "create-user"
        image: quay.io/tinkerbell-actions/cexec:v1.0.0
        timeout: 90
        environment:
          BLOCK_DEVICE: {{.dest_partition}}
          FS_TYPE: ext4
          CHROOT: y
          DEFAULT_INTERPRETER: "/bin/sh -c"
          CMD_LINE: "useradd -p $(openssl passwd -1 tink) -s /bin/bash -d /home/tink/ -m -G sudo tink"
      - name: "create-init-script"
        image: quay.io/tinkerbell-actions/writefile:v1.0.0
        timeout: 90
        environment:
            DEST_DISK: {{.dest_partition}}
            FS_TYPE: ext4
            DEST_PATH: /root/cluster-setup.sh
            UID: 0
            GID: 0
            MODE: 0700
            DIRMODE: 0700
            CONTENTS: |
              #!/bin/bash
              tdnf install -y apparmor-parser apparmor-utils
              iptables -I INPUT -p tcp --dport 6443 -j ACCEPT
              rm /root/cluster-setup.sh
      - name: "create-init-script-service"
        image: quay.io/tinkerbell-actions/writefile:v1.0.0
        timeout: 90
        environment:
            DEST_DISK: {{.dest_partition}}
            FS_TYPE: ext4
            DEST_PATH: /usr/local/lib/systemd/system/cluster-setup.service
            UID: 0
            GID: 0
            MODE: 0600
            DIRMODE: 0600
            CONTENTS: |
              [Unit]
              Before=systemd-user-sessions.service
              Wants=network-online.target
              After=network-online.target
              ConditionPathExists=/root/cluster-setup.sh
              [Service]
              Type=oneshot
              ExecStart=/root/cluster-setup.sh
              RemainAfterExit=yes
              [Install]
              WantedBy=multi-user.target
      - name: "enable-init-script"
        image: quay.io/tinkerbell-actions/cexec:v1.0.0
        timeout: 90
        environment:
            BLOCK_DEVICE: {{.dest_partition}}
            FS_TYPE: ext4
            CHROOT: y
            DEFAULT_INTERPRETER: "/bin/sh -c"
            CMD_LINE: "systemctl enable cluster-setup.service"
      - name: "add-tink-cloud-init-config"
        image: quay.io/tinkerbell-actions/writefile:v1.0.0
        timeout: 90
        environment:
          DEST_DISK: {{.dest_partition}}
          FS_TYPE: ext4
          DEST_PATH: /etc/cloud/cloud.cfg.d/10_tinkerbell.cfg
          UID: 0
          GID: 0
          MODE: 0600
          DIRMODE: 0700
          CONTENTS: |
            datasource:
              Ec2:
                metadata_urls: ["{{.metadata_url}}"]
                strict_id: false
            system_info:
              default_user:
                name: tink
                groups: [wheel, adm]
                sudo: ["ALL=(ALL) NOPASSWD:ALL"]
                shell: /bin/bash
            manage_etc_hosts: localhost
            warnings:
              dsid_missing_source: off
      - name: "add-tink-cloud-init-ds-config"
        image: quay.io/tinkerbell-actions/writefile:v1.0.0
        timeout: 90
        environment:
          DEST_DISK: {{.dest_partition}}
          FS_TYPE: ext4
          DEST_PATH: /etc/cloud/ds-identify.cfg
          UID: 0
          GID: 0
          MODE: 0600
          DIRMODE: 0700
          CONTENTS: |
            datasource: Ec2
      - name: "kexec-image"
        image: quay.io/tinkerbell-actions/kexec:v1.0.0
        timeout: 90
        pid: host
        environment:
          BLOCK_DEVICE: {{.dest_partition}}
          FS_TYPE: ext4
          KERNEL_PATH: /boot/vmlinuz-5.15.86.1-1.cm2
          INITRD_PATH: /boot/initrd.img-5.15.86.1-1.cm2
          CMD_LINE: "root={{.dest_partition}} rw"
"""


def render_workflow(wt: WorkflowTemplate) -> str:
    """Render the provisioning workflow for *wt*.

    *wt* is not modified.  When ``device_template_name`` is empty the
    worker is rendered as ``{{.device_1}}``.

    Raises
    ------
    MissingNameError
        If ``name`` is empty.  Checked first.
    MissingImageURLError
        If ``image_url`` is empty.
    TemplateError
        If the template fails to parse or execute.
    """
    if not wt.name:
        raise MissingNameError()
    if not wt.image_url:
        raise MissingImageURLError()

    values = wt.model_dump()
    values["device_template_name"] = wt.effective_device_template_name

    logger.debug(
        "Rendering workflow %s for worker %s",
        wt.name,
        values["device_template_name"],
    )
    rendered = render_template(WORKFLOW_TEMPLATE, values)
    logger.debug("Rendered workflow %s (%d bytes)", wt.name, len(rendered))
    return rendered

"""CAPT templates - workflow and hardware task rendering.

Renders the Tinkerbell provisioning workflow and the Rufio power/boot job
used when creating machines for ClusterAPI.
"""

try:
    from importlib.metadata import version

    __version__ = version("capt-templates")
except Exception:
    __version__ = "0.0.0.dev0"

__all__ = ["__version__"]

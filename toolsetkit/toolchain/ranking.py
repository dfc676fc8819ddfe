"""
Preference order over Visual Studio instances.

Instances are ranked by release type (stable, then prerelease, then legacy)
and then by version text, newest first. Version text is compared as a
string, so "9.0" ranks above "10.0"; every version vswhere reports for the
supported generations has a two-digit major, which keeps this in step with
numeric order in practice.
"""

from typing import Iterable, List, Tuple

from toolsetkit.toolchain.instances import VisualStudioInstance


def _preference_key(instance: VisualStudioInstance) -> Tuple[int, str]:
    return (instance.release_type.weight, instance.version)


def is_preferred(left: VisualStudioInstance, right: VisualStudioInstance) -> bool:
    """
    Check whether one instance strictly precedes another.

    Args:
        left: Candidate instance
        right: Instance to compare against

    Returns:
        True if left ranks before right
    """
    if left.release_type != right.release_type:
        return left.release_type.weight > right.release_type.weight
    return left.version > right.version


def rank_instances(
    instances: Iterable[VisualStudioInstance],
) -> List[VisualStudioInstance]:
    """
    Sort instances preferred-first.

    The sort is stable: instances with the same release type and version
    keep their discovery order.

    Args:
        instances: Instances in discovery order

    Returns:
        New list, most preferred first
    """
    return sorted(instances, key=_preference_key, reverse=True)

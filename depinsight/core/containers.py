from __future__ import annotations

from depinsight.analyzers.composer_unused import ComposerUnusedChecker
from depinsight.analyzers.fawltydeps import FawltyDepsChecker
from depinsight.analyzers.knip import KnipChecker
from depinsight.analyzers.maven import MavenChecker
from depinsight.analyzers.registry import CheckerRegistry
from depinsight.deducers.composer_json import ComposerJsonDeducer
from depinsight.deducers.package_json import PackageJsonDeducer
from depinsight.deducers.pom_xml import PomXmlDeducer
from depinsight.deducers.pyproject_toml import PyprojectTomlDeducer


def build_checker_registry() -> CheckerRegistry:
    """Register every supported ecosystem.

    Order matters: checkers run, and their findings are reported, in the
    order listed here.
    """
    return CheckerRegistry(
        [
            KnipChecker(PackageJsonDeducer()),
            ComposerUnusedChecker(ComposerJsonDeducer()),
            FawltyDepsChecker(PyprojectTomlDeducer()),
            MavenChecker(PomXmlDeducer()),
        ]
    )

"""Seed data for the default license catalog."""

from license_risk.models.license import License, LicenseCategory, ObligationKind

_ATTRIBUTION_NOTICE = (ObligationKind.ATTRIBUTION, ObligationKind.NOTICE_PRESERVATION)

DEFAULT_LICENSES: tuple[License, ...] = (
    # Permissive
    License(
        identifier="MIT",
        name="MIT License",
        category=LicenseCategory.PERMISSIVE,
        obligations=_ATTRIBUTION_NOTICE,
        osi_approved=True,
        fsf_approved=True,
        url="https://opensource.org/licenses/MIT",
    ),
    License(
        identifier="Apache-2.0",
        name="Apache License 2.0",
        category=LicenseCategory.PERMISSIVE,
        obligations=(*_ATTRIBUTION_NOTICE, ObligationKind.PATENT_GRANT),
        osi_approved=True,
        fsf_approved=True,
        url="https://www.apache.org/licenses/LICENSE-2.0",
    ),
    License(
        identifier="BSD-3-Clause",
        name='BSD 3-Clause "New" or "Revised" License',
        category=LicenseCategory.PERMISSIVE,
        obligations=_ATTRIBUTION_NOTICE,
        osi_approved=True,
        fsf_approved=True,
        url="https://opensource.org/licenses/BSD-3-Clause",
    ),
    License(
        identifier="BSD-2-Clause",
        name='BSD 2-Clause "Simplified" License',
        category=LicenseCategory.PERMISSIVE,
        obligations=_ATTRIBUTION_NOTICE,
        osi_approved=True,
        fsf_approved=True,
        url="https://opensource.org/licenses/BSD-2-Clause",
    ),
    License(
        identifier="ISC",
        name="ISC License",
        category=LicenseCategory.PERMISSIVE,
        obligations=_ATTRIBUTION_NOTICE,
        osi_approved=True,
        fsf_approved=True,
        url="https://opensource.org/licenses/ISC",
    ),
    License(
        identifier="Zlib",
        name="zlib License",
        category=LicenseCategory.PERMISSIVE,
        obligations=_ATTRIBUTION_NOTICE,
        osi_approved=True,
        fsf_approved=True,
        url="https://opensource.org/licenses/Zlib",
    ),
    License(
        identifier="CC-BY-4.0",
        name="Creative Commons Attribution 4.0 International",
        category=LicenseCategory.PERMISSIVE,
        obligations=(ObligationKind.ATTRIBUTION,),
        url="https://creativecommons.org/licenses/by/4.0/",
    ),
    # Copyleft
    License(
        identifier="GPL-3.0-only",
        name="GNU General Public License v3.0 only",
        category=LicenseCategory.COPYLEFT,
        obligations=(
            ObligationKind.ATTRIBUTION,
            ObligationKind.COPYLEFT,
            ObligationKind.DISCLOSE_SOURCE,
            ObligationKind.SAME_LICENSE,
            ObligationKind.PATENT_GRANT,
        ),
        requires_source_disclosure=True,
        osi_approved=True,
        fsf_approved=True,
        url="https://www.gnu.org/licenses/gpl-3.0.html",
        deprecated_ids=("GPL-3.0",),
    ),
    License(
        identifier="GPL-2.0-only",
        name="GNU General Public License v2.0 only",
        category=LicenseCategory.COPYLEFT,
        obligations=(
            ObligationKind.ATTRIBUTION,
            ObligationKind.COPYLEFT,
            ObligationKind.DISCLOSE_SOURCE,
            ObligationKind.SAME_LICENSE,
        ),
        requires_source_disclosure=True,
        osi_approved=True,
        fsf_approved=True,
        url="https://www.gnu.org/licenses/old-licenses/gpl-2.0.html",
        deprecated_ids=("GPL-2.0",),
    ),
    License(
        identifier="AGPL-3.0-only",
        name="GNU Affero General Public License v3.0 only",
        category=LicenseCategory.COPYLEFT,
        obligations=(
            ObligationKind.ATTRIBUTION,
            ObligationKind.COPYLEFT,
            ObligationKind.DISCLOSE_SOURCE,
            ObligationKind.SAME_LICENSE,
            ObligationKind.PATENT_GRANT,
        ),
        requires_source_disclosure=True,
        osi_approved=True,
        fsf_approved=True,
        url="https://www.gnu.org/licenses/agpl-3.0.html",
        deprecated_ids=("AGPL-3.0",),
    ),
    License(
        identifier="CC-BY-SA-4.0",
        name="Creative Commons Attribution Share Alike 4.0 International",
        category=LicenseCategory.COPYLEFT,
        obligations=(ObligationKind.ATTRIBUTION, ObligationKind.SHARE_ALIKE),
        url="https://creativecommons.org/licenses/by-sa/4.0/",
    ),
    # Weak copyleft
    License(
        identifier="LGPL-3.0-only",
        name="GNU Lesser General Public License v3.0 only",
        category=LicenseCategory.WEAK_COPYLEFT,
        obligations=(
            ObligationKind.ATTRIBUTION,
            ObligationKind.COPYLEFT,
            ObligationKind.DISCLOSE_SOURCE,
        ),
        requires_source_disclosure=True,
        osi_approved=True,
        fsf_approved=True,
        url="https://www.gnu.org/licenses/lgpl-3.0.html",
        deprecated_ids=("LGPL-3.0",),
    ),
    License(
        identifier="LGPL-2.1-only",
        name="GNU Lesser General Public License v2.1 only",
        category=LicenseCategory.WEAK_COPYLEFT,
        obligations=(
            ObligationKind.ATTRIBUTION,
            ObligationKind.COPYLEFT,
            ObligationKind.DISCLOSE_SOURCE,
        ),
        requires_source_disclosure=True,
        osi_approved=True,
        fsf_approved=True,
        url="https://www.gnu.org/licenses/old-licenses/lgpl-2.1.html",
        deprecated_ids=("LGPL-2.1",),
    ),
    License(
        identifier="MPL-2.0",
        name="Mozilla Public License 2.0",
        category=LicenseCategory.WEAK_COPYLEFT,
        obligations=(
            ObligationKind.ATTRIBUTION,
            ObligationKind.DISCLOSE_SOURCE,
            ObligationKind.PATENT_GRANT,
        ),
        requires_source_disclosure=True,
        osi_approved=True,
        fsf_approved=True,
        url="https://www.mozilla.org/en-US/MPL/2.0/",
    ),
    License(
        identifier="EPL-2.0",
        name="Eclipse Public License 2.0",
        category=LicenseCategory.WEAK_COPYLEFT,
        obligations=(
            ObligationKind.ATTRIBUTION,
            ObligationKind.DISCLOSE_SOURCE,
            ObligationKind.PATENT_GRANT,
        ),
        requires_source_disclosure=True,
        osi_approved=True,
        url="https://www.eclipse.org/legal/epl-2.0/",
    ),
    License(
        identifier="Artistic-2.0",
        name="Artistic License 2.0",
        category=LicenseCategory.WEAK_COPYLEFT,
        obligations=(ObligationKind.ATTRIBUTION, ObligationKind.DISCLOSE_SOURCE),
        requires_source_disclosure=True,
        osi_approved=True,
        fsf_approved=True,
        url="https://opensource.org/licenses/Artistic-2.0",
    ),
    # Public domain
    License(
        identifier="CC0-1.0",
        name="Creative Commons Zero v1.0 Universal",
        category=LicenseCategory.PUBLIC_DOMAIN,
        fsf_approved=True,
        url="https://creativecommons.org/publicdomain/zero/1.0/",
    ),
    License(
        identifier="Unlicense",
        name="The Unlicense",
        category=LicenseCategory.PUBLIC_DOMAIN,
        osi_approved=True,
        fsf_approved=True,
        url="https://unlicense.org/",
    ),
    License(
        identifier="WTFPL",
        name="Do What The F*ck You Want To Public License",
        category=LicenseCategory.PUBLIC_DOMAIN,
        fsf_approved=True,
        url="http://www.wtfpl.net/",
    ),
    # Custom
    License(
        identifier="CC-BY-NC-4.0",
        name="Creative Commons Attribution Non Commercial 4.0 International",
        category=LicenseCategory.CUSTOM,
        obligations=(ObligationKind.ATTRIBUTION, ObligationKind.NO_COMMERCIAL_USE),
        allows_commercial_use=False,
        url="https://creativecommons.org/licenses/by-nc/4.0/",
    ),
    # Proprietary
    License(
        identifier="UNLICENSED",
        name="No License (All Rights Reserved)",
        category=LicenseCategory.PROPRIETARY,
        allows_commercial_use=False,
        allows_modification=False,
        allows_distribution=False,
    ),
)

# Informal names seen in package metadata, keyed lowercase
DEFAULT_ALIASES: dict[str, str] = {
    "mit license": "MIT",
    "expat": "MIT",
    "apache": "Apache-2.0",
    "apache-2": "Apache-2.0",
    "apache 2.0": "Apache-2.0",
    "apache license 2.0": "Apache-2.0",
    "apache software license": "Apache-2.0",
    "asl-2.0": "Apache-2.0",
    "bsd": "BSD-3-Clause",
    "bsd-3": "BSD-3-Clause",
    "bsd-2": "BSD-2-Clause",
    "bsd 3-clause": "BSD-3-Clause",
    "bsd 2-clause": "BSD-2-Clause",
    "new bsd": "BSD-3-Clause",
    "simplified bsd": "BSD-2-Clause",
    "gpl": "GPL-3.0-only",
    "gpl-3": "GPL-3.0-only",
    "gpl-2": "GPL-2.0-only",
    "gpl3": "GPL-3.0-only",
    "gpl2": "GPL-2.0-only",
    "gnu gpl": "GPL-3.0-only",
    "gnu gpl v3": "GPL-3.0-only",
    "gnu gpl v2": "GPL-2.0-only",
    "lgpl": "LGPL-3.0-only",
    "lgpl-3": "LGPL-3.0-only",
    "lgpl3": "LGPL-3.0-only",
    "lgpl2.1": "LGPL-2.1-only",
    "lesser gpl": "LGPL-3.0-only",
    "agpl": "AGPL-3.0-only",
    "agpl-3": "AGPL-3.0-only",
    "affero gpl": "AGPL-3.0-only",
    "mpl": "MPL-2.0",
    "mozilla": "MPL-2.0",
    "mozilla public license": "MPL-2.0",
    "epl": "EPL-2.0",
    "eclipse": "EPL-2.0",
    "eclipse public license": "EPL-2.0",
    "isc license": "ISC",
    "cc0": "CC0-1.0",
    "public domain": "CC0-1.0",
    "cc-by": "CC-BY-4.0",
    "cc-by-sa": "CC-BY-SA-4.0",
    "cc-by-nc": "CC-BY-NC-4.0",
    "creative commons": "CC-BY-4.0",
    "artistic": "Artistic-2.0",
    "artistic license": "Artistic-2.0",
    "proprietary": "UNLICENSED",
    "all rights reserved": "UNLICENSED",
    "copyright": "UNLICENSED",
    "no license": "UNLICENSED",
}

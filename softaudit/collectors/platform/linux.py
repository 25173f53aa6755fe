"""
Source d'inventaire Linux

Base de paquets dpkg (Debian/Ubuntu) interrogée via dpkg-query.
"""

from typing import Dict, Any, List

from ..base import InventorySource, execute_command

DPKG_FORMAT = '${Package}\\t${Version}\\t${Maintainer}\\t${Status}\\n'


class DpkgSource(InventorySource):
    """
    Paquets installés selon dpkg

    dpkg ne conserve ni date d'installation ni emplacement : ces champs
    sont absents des entrées.
    """

    label = "dpkg"

    def read_entries(self) -> List[Dict[str, Any]]:
        output = execute_command(['dpkg-query', '-W', f'-f={DPKG_FORMAT}'])

        entries = []
        for line in output.splitlines():
            parts = line.split('\t')
            if len(parts) < 4:
                continue

            name, version, maintainer, status = parts[:4]
            # Ignorer les paquets supprimés dont la configuration reste
            if not status.endswith(' installed'):
                continue

            entries.append({
                'DisplayName': name,
                'DisplayVersion': version or None,
                'InstallDate': None,
                'Publisher': maintainer or None,
                'InstallLocation': None,
            })

        self._debug(f"dpkg: {len(entries)} paquets trouvés")
        return entries

"""
Sources d'inventaire Windows

Lecture des clés de désinstallation du registre (applications 64 bits et
applications 32 bits enregistrées sous WOW6432Node).
"""

from typing import Dict, Any, List

from ..base import InventorySource

UNINSTALL_64 = r"SOFTWARE\Microsoft\Windows\CurrentVersion\Uninstall"
UNINSTALL_32 = r"SOFTWARE\WOW6432Node\Microsoft\Windows\CurrentVersion\Uninstall"

# Valeurs lues dans chaque sous-clé d'application
VALUE_NAMES = ['DisplayName', 'DisplayVersion', 'InstallDate', 'Publisher', 'InstallLocation']


class RegistrySource(InventorySource):
    """
    Une clé de désinstallation sous HKEY_LOCAL_MACHINE

    Chaque sous-clé (identifiant opaque par application) donne une entrée.
    """

    def __init__(self, subkey: str, label: str, logger=None):
        super().__init__(logger)
        self.subkey = subkey
        self.label = label

    def read_entries(self) -> List[Dict[str, Any]]:
        import winreg

        entries = []
        key = winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, self.subkey)
        try:
            i = 0
            while True:
                try:
                    subkey_name = winreg.EnumKey(key, i)
                except OSError:
                    # Plus de sous-clés
                    break
                i += 1

                try:
                    subkey = winreg.OpenKey(key, subkey_name)
                except OSError as e:
                    self._debug(f"Sous-clé illisible {self.subkey}\\{subkey_name}: {e}")
                    continue

                try:
                    entries.append(self._read_values(winreg, subkey, subkey_name))
                finally:
                    winreg.CloseKey(subkey)
        finally:
            winreg.CloseKey(key)

        self._debug(f"Registre {self.label}: {len(entries)} entrées")
        return entries

    def _read_values(self, winreg, subkey, subkey_name: str) -> Dict[str, Any]:
        values = {}
        for value_name in VALUE_NAMES:
            try:
                values[value_name] = winreg.QueryValueEx(subkey, value_name)[0]
            except FileNotFoundError:
                values[value_name] = None
            except OSError as e:
                # Valeur illisible : l'entrée est gardée, le champ est absent
                self._debug(f"Valeur illisible {self.subkey}\\{subkey_name}\\{value_name}: {e}")
                values[value_name] = None
        return values


def registry_sources(logger=None) -> List[RegistrySource]:
    """
    Sources du registre de désinstallation, 64 bits puis 32 bits

    Args:
        logger: Instance de AuditLogger

    Returns:
        list: Les deux sources du registre
    """
    return [
        RegistrySource(UNINSTALL_64, "64-bit", logger),
        RegistrySource(UNINSTALL_32, "32-bit", logger),
    ]

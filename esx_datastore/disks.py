# Copyright: (c) 2018, Ansible Project
# GNU General Public License v3.0+ (see COPYING or https://www.gnu.org/licenses/gpl-3.0.txt)


def last_match(disks, predicate):
    found = None
    for disk in disks:
        if predicate(disk):
            found = disk
    return found


class DiskLocator(object):
    """Selects the unformatted disk a VMFS datastore should be created on.

    A locator belongs to a single create call. A disk once found is kept for
    the remaining attempts of that call; a miss is queried again next time.
    When several disks qualify the last one enumerated by the host wins.
    """

    def __init__(self, storage, resolver, spec):
        self.storage = storage
        self.resolver = resolver
        self.spec = spec
        self._disk = None

    def find(self):
        if self._disk is None:
            self._disk = self._select(self.storage.query_available_disks().unwrap())
        return self._disk

    def _select(self, disks):
        spec = self.spec
        if spec.target_iqn:
            return last_match(
                disks,
                lambda disk: self.resolver.target_identity_for(disk.uuid, spec.target_iqn) == spec.target_iqn)

        if spec.target_model and spec.target_disk_id:
            return last_match(
                disks,
                lambda disk: (disk.model == spec.target_model
                              and spec.target_disk_id in disk.deviceName
                              and self.resolver.lun_number(disk.uuid) == spec.lun))

        return last_match(disks, lambda disk: self.resolver.lun_number(disk.uuid) == spec.lun)

# Copyright: (c) 2018, Ansible Project
# GNU General Public License v3.0+ (see COPYING or https://www.gnu.org/licenses/gpl-3.0.txt)

from esx_datastore.errors import DatastoreError
from esx_datastore.host_storage import DUPLICATE_NAME, HOST_CONFIG

SCANNING = 'scanning'
CREATING = 'creating'
EXISTS = 'exists'
FAILED = 'failed'


class VmfsProvisioner(object):
    def __init__(self, storage, locator, spec, module, exists):
        self.storage = storage
        self.locator = locator
        self.spec = spec
        self.module = module
        self.exists = exists
        self.state = SCANNING

    def create_options(self, device_path):
        options = self.storage.query_create_options(device_path).unwrap()
        if not options:
            raise DatastoreError("Could not determine whether VMFS datastore already exists")
        return options

    def existing_vmfs(self, disk):
        """True when the disk already holds a partition usable without a format change."""
        for option in self.create_options(disk.deviceName):
            info = getattr(option, 'info', None)
            if not info:
                continue
            change = getattr(info, 'partitionFormatChange', None)
            if change is None:
                continue
            if not change:
                return True
        return False

    def create_vmfs_lun(self):
        disk = self.locator.find()
        if disk is None:
            self.state = SCANNING
            return False

        self.state = CREATING
        # Use the first spec returned by QueryVmfsDatastoreCreateOptions
        spec = self.create_options(disk.devicePath)[0].spec
        spec.vmfs.volumeName = self.spec.datastore
        self.module.debug("Creating VMFS volume %s on device %s" % (self.spec.datastore, disk.canonicalName))
        if self.existing_vmfs(disk):
            self.state = FAILED
            raise DatastoreError("Existing VMFS partition on disk, cannot create datastore on %s" % disk.deviceName)

        result = self.storage.create_vmfs_datastore(spec)
        if result.ok:
            self.state = EXISTS
            return True

        if result.kind not in (DUPLICATE_NAME, HOST_CONFIG):
            self.state = FAILED
            raise DatastoreError(result.message)

        if self.exists():
            self.state = EXISTS
            return True

        self.module.debug("VMFS volume create failure: %s" % result.message)
        return False

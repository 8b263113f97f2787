# Copyright: (c) 2018, Ansible Project
# GNU General Public License v3.0+ (see COPYING or https://www.gnu.org/licenses/gpl-3.0.txt)

import time

from esx_datastore.disks import DiskLocator
from esx_datastore.errors import CREATE_FAILURE, DESTROY_FAILURE, DatastoreError, HostStorageFault
from esx_datastore.spec import CIFS, NFS, VMFS, nas_volume
from esx_datastore.topology import ScsiTopologyResolver
from esx_datastore.vmfs import FAILED, VmfsProvisioner

DEFAULT_ATTEMPTS = 10
DEFAULT_DELAY = 10


class DatastoreFacts(object):
    """Read view over a datastore handle returned by DatastoreReconciler.exists()."""

    def __init__(self, datastore, module):
        self.datastore = datastore
        self.module = module

    @property
    def name(self):
        return self.datastore.name

    @property
    def type(self):
        return self.datastore.summary.type

    @type.setter
    def type(self, value):
        self.module.warn("Can not change resource type.")

    @property
    def remote_host(self):
        nas = getattr(self.datastore.info, 'nas', None)
        return nas.remoteHost if nas else None

    @property
    def remote_path(self):
        nas = getattr(self.datastore.info, 'nas', None)
        return nas.remotePath if nas else None

    def as_dict(self):
        return dict(name=self.name, type=self.type, remote_host=self.remote_host, remote_path=self.remote_path)


class DatastoreReconciler(object):
    def __init__(self, storage, module, attempts=DEFAULT_ATTEMPTS, delay=DEFAULT_DELAY):
        self.storage = storage
        self.module = module
        self.attempts = attempts
        self.delay = delay

    def exists(self, spec):
        for datastore in self.storage.list_datastores().unwrap():
            if datastore.name == spec.datastore:
                return datastore
        return None

    def facts(self, spec):
        datastore = self.exists(spec)
        if datastore is None:
            return None
        return DatastoreFacts(datastore, self.module)

    def create(self, spec):
        try:
            if spec.type in (NFS, CIFS):
                self.create_nas(spec)
            elif spec.type == VMFS:
                self.create_vmfs(spec)
            else:
                raise DatastoreError("Unsupported datastore type '%s'" % spec.type)
        except (DatastoreError, HostStorageFault) as e:
            raise DatastoreError(CREATE_FAILURE % e.msg)

    def destroy(self, spec):
        try:
            datastore = self.exists(spec)
            if datastore is None:
                raise DatastoreError("Datastore '%s' not found." % spec.datastore)
            result = self.storage.remove_datastore(datastore)
            if not result.ok:
                raise DatastoreError(result.message)
        except (DatastoreError, HostStorageFault) as e:
            raise DatastoreError(DESTROY_FAILURE % e.msg)

    def create_nas(self, spec):
        result = self.storage.create_nas_datastore(nas_volume(spec))
        if not result.ok:
            raise DatastoreError(result.message)
        return result.value

    def create_vmfs(self, spec):
        locator = DiskLocator(self.storage, ScsiTopologyResolver(self.storage, self.module), spec)
        provisioner = VmfsProvisioner(self.storage, locator, spec, self.module, lambda: self.exists(spec))

        attempt = self.attempts
        while not provisioner.create_vmfs_lun() and not self.exists(spec) and attempt > 0:
            self.module.debug('Rescanning for volume')
            if not locator.find():
                self.storage.rescan_all_hba().unwrap()
            self.storage.rescan_vmfs().unwrap()
            self.storage.refresh_storage_system().unwrap()
            # Rescans complete asynchronously on the host
            time.sleep(self.delay)
            attempt -= 1

        datastore = self.exists(spec)
        if datastore:
            return datastore
        provisioner.state = FAILED
        if spec.target_iqn:
            raise DatastoreError("Target IQN '%s' not detected." % spec.target_iqn)
        raise DatastoreError("LUN '%s' not detected." % spec.lun)

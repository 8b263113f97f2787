# Copyright: (c) 2018, Ansible Project
# GNU General Public License v3.0+ (see COPYING or https://www.gnu.org/licenses/gpl-3.0.txt)

from pyVmomi import vim, vmodl

from ansible.module_utils.common.text.converters import to_native

from esx_datastore.errors import HostStorageFault

DUPLICATE_NAME = 'duplicate_name'
HOST_CONFIG = 'host_config'
OTHER = 'other'


def fault_kind(fault):
    if isinstance(fault, vim.fault.DuplicateName):
        return DUPLICATE_NAME
    if isinstance(fault, vim.fault.HostConfigFault):
        return HOST_CONFIG
    return OTHER


def fault_message(fault):
    msg = getattr(fault, 'msg', None)
    if msg:
        return to_native(msg)
    return type(fault).__name__.rsplit('.', 1)[-1]


class Result(object):
    """Outcome of one call against the host: either a value or a fault."""

    __slots__ = ('value', 'fault')

    def __init__(self, value=None, fault=None):
        self.value = value
        self.fault = fault

    @property
    def ok(self):
        return self.fault is None

    @property
    def kind(self):
        if self.fault is None:
            return None
        return fault_kind(self.fault)

    @property
    def message(self):
        if self.fault is None:
            return None
        return fault_message(self.fault)

    def unwrap(self):
        if self.fault is not None:
            raise HostStorageFault(self.message, self.fault)
        return self.value

    def __repr__(self):
        if self.ok:
            return 'Result(value=%r)' % (self.value,)
        return 'Result(fault=%s: %s)' % (self.kind, self.message)


class HostStorageService(object):
    """Datastore and storage system calls of a single ESXi host."""

    def __init__(self, host):
        self.host = host

    @property
    def datastore_system(self):
        return self.host.configManager.datastoreSystem

    @property
    def storage_system(self):
        return self.host.configManager.storageSystem

    def _call(self, method, *args, **kwargs):
        try:
            return Result(value=method(*args, **kwargs))
        except vmodl.MethodFault as fault:
            return Result(fault=fault)

    def create_nas_datastore(self, volume):
        spec = vim.host.NasVolume.Specification(**volume)
        return self._call(self.datastore_system.CreateNasDatastore, spec=spec)

    def create_vmfs_datastore(self, spec):
        return self._call(self.datastore_system.CreateVmfsDatastore, spec=spec)

    def remove_datastore(self, datastore):
        return self._call(self.datastore_system.RemoveDatastore, datastore=datastore)

    def query_available_disks(self):
        return self._call(self.datastore_system.QueryAvailableDisksForVmfs)

    def query_create_options(self, device_path):
        return self._call(self.datastore_system.QueryVmfsDatastoreCreateOptions, devicePath=device_path)

    def rescan_all_hba(self):
        return self._call(self.storage_system.RescanAllHba)

    def rescan_vmfs(self):
        return self._call(self.storage_system.RescanVmfs)

    def refresh_storage_system(self):
        return self._call(self.storage_system.RefreshStorageSystem)

    def list_datastores(self):
        return self._call(lambda: list(self.host.datastore))

    def scsi_topology(self):
        return self._call(lambda: list(self.storage_system.storageDeviceInfo.scsiTopology.adapter))

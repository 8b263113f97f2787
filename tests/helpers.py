# Copyright: (c) 2018, Ansible Project
# GNU General Public License v3.0+ (see COPYING or https://www.gnu.org/licenses/gpl-3.0.txt)

from types import SimpleNamespace

from esx_datastore.host_storage import Result


def scsi_disk(uuid, model='MSA 2040 SAN'):
    path = '/vmfs/devices/disks/naa.%s' % uuid
    return SimpleNamespace(uuid=uuid, deviceName=path, devicePath=path,
                           canonicalName='naa.%s' % uuid, model=model)


def scsi_lun(uuid, number):
    return SimpleNamespace(key='key-vim.host.ScsiTopology.Lun-%s' % uuid, lun=number)


def iscsi_target(iqn, *luns):
    return SimpleNamespace(transport=SimpleNamespace(iScsiName=iqn), lun=list(luns))


def fc_target(node_wwn, port_wwn, *luns):
    transport = SimpleNamespace(nodeWorldWideName=node_wwn, portWorldWideName=port_wwn)
    return SimpleNamespace(transport=transport, lun=list(luns))


def adapter(*targets):
    return SimpleNamespace(target=list(targets))


def datastore(name, type='NFS', remote_host=None, remote_path=None):
    nas = None
    if type in ('NFS', 'CIFS'):
        nas = SimpleNamespace(remoteHost=remote_host, remotePath=remote_path)
    return SimpleNamespace(name=name, summary=SimpleNamespace(type=type), info=SimpleNamespace(nas=nas))


def create_option(partition_format_change=True, info=True):
    return SimpleNamespace(
        info=SimpleNamespace(partitionFormatChange=partition_format_change) if info else None,
        spec=SimpleNamespace(vmfs=SimpleNamespace(volumeName=None)))


class FakeHostStorage(object):
    """In-memory HostStorageService recording every call made against it."""

    def __init__(self, disks=(), adapters=(), options=None, datastores=(), appear_after=None,
                 appearing=None, vmfs_fault=None, nas_fault=None, remove_fault=None):
        self.disks = list(disks)
        self.adapters = list(adapters)
        self.options = options
        self.datastores = list(datastores)
        self.appear_after = appear_after
        self.appearing = appearing
        self.vmfs_fault = vmfs_fault
        self.nas_fault = nas_fault
        self.remove_fault = remove_fault
        self.calls = []
        self.created = []

    def count(self, name):
        return len([call for call in self.calls if call[0] == name])

    def create_nas_datastore(self, volume):
        self.calls.append(('create_nas_datastore', volume))
        if self.nas_fault:
            return Result(fault=self.nas_fault)
        self.created.append(volume)
        return Result(value=datastore(volume['localPath'], type=volume.get('type', 'NFS')))

    def create_vmfs_datastore(self, spec):
        self.calls.append(('create_vmfs_datastore', spec))
        if self.vmfs_fault:
            return Result(fault=self.vmfs_fault)
        self.created.append(spec)
        handle = datastore(spec.vmfs.volumeName, type='VMFS')
        self.datastores.append(handle)
        return Result(value=handle)

    def remove_datastore(self, handle):
        self.calls.append(('remove_datastore', handle))
        if self.remove_fault:
            return Result(fault=self.remove_fault)
        self.datastores.remove(handle)
        return Result()

    def query_available_disks(self):
        self.calls.append(('query_available_disks',))
        return Result(value=list(self.disks))

    def query_create_options(self, device_path):
        self.calls.append(('query_create_options', device_path))
        if self.options is None:
            return Result(value=[create_option()])
        return Result(value=self.options.get(device_path))

    def rescan_all_hba(self):
        self.calls.append(('rescan_all_hba',))
        return Result()

    def rescan_vmfs(self):
        self.calls.append(('rescan_vmfs',))
        return Result()

    def refresh_storage_system(self):
        self.calls.append(('refresh_storage_system',))
        return Result()

    def list_datastores(self):
        self.calls.append(('list_datastores',))
        if self.appear_after is not None and self.count('list_datastores') >= self.appear_after:
            return Result(value=self.datastores + [self.appearing])
        return Result(value=list(self.datastores))

    def scsi_topology(self):
        self.calls.append(('scsi_topology',))
        return Result(value=list(self.adapters))

# Copyright: (c) 2018, Ansible Project
# GNU General Public License v3.0+ (see COPYING or https://www.gnu.org/licenses/gpl-3.0.txt)

from collections import namedtuple

NFS = 'NFS'
CIFS = 'CIFS'
VMFS = 'VMFS'
DATASTORE_TYPES = (NFS, CIFS, VMFS)

# Declared field -> vim.host.NasVolume.Specification property
NAS_VOLUME_FIELDS = (
    ('remote_host', 'remoteHost'),
    ('remote_path', 'remotePath'),
    ('local_path', 'localPath'),
    ('access_mode', 'accessMode'),
)

CIFS_CREDENTIAL_FIELDS = (
    ('user_name', 'userName'),
    ('password', 'password'),
)

_FIELDS = (
    'name', 'type',
    'remote_host', 'remote_path', 'local_path', 'access_mode', 'user_name', 'password',
    'lun', 'target_iqn', 'target_model', 'target_disk_id',
)


class DatastoreSpec(namedtuple('DatastoreSpec', _FIELDS)):
    """Declared state of one datastore on one ESXi host."""

    __slots__ = ()

    def __new__(cls, name, type=NFS, remote_host=None, remote_path=None, local_path=None,
                access_mode='readWrite', user_name=None, password=None, lun=None,
                target_iqn=None, target_model=None, target_disk_id=None):
        if local_path is None:
            local_path = name
        return super(DatastoreSpec, cls).__new__(
            cls, name, type, remote_host, remote_path, local_path, access_mode, user_name,
            password, lun, target_iqn, target_model, target_disk_id)

    @property
    def datastore(self):
        return self.name

    @classmethod
    def from_params(cls, params):
        return cls(
            name=params['datastore_name'],
            type=params.get('datastore_type'),
            remote_host=params.get('remote_host'),
            remote_path=params.get('remote_path'),
            local_path=params.get('local_path'),
            access_mode=params.get('access_mode') or 'readWrite',
            user_name=params.get('cifs_username'),
            password=params.get('cifs_password'),
            lun=params.get('lun'),
            target_iqn=params.get('target_iqn'),
            target_model=params.get('target_model'),
            target_disk_id=params.get('target_disk_id'),
        )


def nas_volume(spec):
    """Build the NAS volume descriptor for an NFS or CIFS spec."""
    volume = {}
    for field, prop in NAS_VOLUME_FIELDS:
        volume[prop] = getattr(spec, field)

    if spec.type == CIFS:
        volume['type'] = CIFS
        for field, prop in CIFS_CREDENTIAL_FIELDS:
            value = getattr(spec, field)
            if value:
                volume[prop] = value
    return volume

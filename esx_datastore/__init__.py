# Copyright: (c) 2018, Ansible Project
# GNU General Public License v3.0+ (see COPYING or https://www.gnu.org/licenses/gpl-3.0.txt)

from esx_datastore.errors import DatastoreError, HostStorageFault
from esx_datastore.host_storage import HostStorageService, Result
from esx_datastore.reconciler import DatastoreFacts, DatastoreReconciler
from esx_datastore.spec import DatastoreSpec

__all__ = [
    'DatastoreError',
    'DatastoreFacts',
    'DatastoreReconciler',
    'DatastoreSpec',
    'HostStorageFault',
    'HostStorageService',
    'Result',
]

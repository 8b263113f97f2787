# Copyright: (c) 2018, Ansible Project
# GNU General Public License v3.0+ (see COPYING or https://www.gnu.org/licenses/gpl-3.0.txt)

CREATE_FAILURE = "Unable to perform the operation because the following exception occurred:- \n %s"
DESTROY_FAILURE = "Unable to perform the operation because the following exception occurred - \n %s"


class DatastoreError(Exception):
    """Fatal failure of a datastore operation, reported to the user as is."""

    def __init__(self, msg):
        super(DatastoreError, self).__init__(msg)
        self.msg = msg


class HostStorageFault(Exception):
    """A vSphere fault raised from an unwrapped Result."""

    def __init__(self, msg, fault=None):
        super(HostStorageFault, self).__init__(msg)
        self.msg = msg
        self.fault = fault

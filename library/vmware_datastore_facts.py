#!/usr/bin/python
# -*- coding: utf-8 -*-

# Copyright: (c) 2018, Ansible Project
# GNU General Public License v3.0+ (see COPYING or https://www.gnu.org/licenses/gpl-3.0.txt)

ANSIBLE_METADATA = {
    'metadata_version': '1.1',
    'status': ['preview'],
    'supported_by': 'community'
}

DOCUMENTATION = r'''
---
module: vmware_datastore_facts
short_description: Gather facts about datastores of an ESXi host
description:
- This module can be used to read the type and NAS share of datastores on ESXi host.
- All parameters and VMware object names are case sensitive.
version_added: '0.1'
notes:
- Tested on vSphere 6.0 and 6.5
requirements:
- python >= 3.9
- PyVmomi
options:
  datastore_name:
    description:
    - Name of the datastore to report. All datastores of the host are reported if omitted.
    required: false
  esxi_hostname:
    description:
    - ESXi hostname owning the datastores.
    required: true
extends_documentation_fragment: community.vmware.vmware.documentation
'''

EXAMPLES = r'''
- name: Gather datastore facts of ESXi
  vmware_datastore_facts:
      hostname: '{{ vcenter_hostname }}'
      username: '{{ vcenter_user }}'
      password: '{{ vcenter_pass }}'
      esxi_hostname: '{{ inventory_hostname }}'
  delegate_to: localhost
  register: datastore_facts
'''

RETURN = r'''
datastores:
  description: name, type, remote_host and remote_path of each datastore
  returned: always
  type: list
  sample: [{"name": "nfs_datastore01", "type": "NFS", "remote_host": "nfs1", "remote_path": "/export/ds01"}]
'''

try:
    from pyVmomi import vmodl
except ImportError:
    pass

from ansible.module_utils.basic import AnsibleModule
from ansible.module_utils.common.text.converters import to_native
from ansible_collections.community.vmware.plugins.module_utils.vmware import (vmware_argument_spec, connect_to_api,
                                                                              find_hostsystem_by_name)

from esx_datastore import DatastoreFacts, DatastoreReconciler, DatastoreSpec, HostStorageService


class VMwareDatastoreFacts(object):
    def __init__(self, module):
        self.datastore_name = module.params.get('datastore_name')
        self.esxi_hostname = module.params.get('esxi_hostname')
        self.content = connect_to_api(module)
        self.module = module

        self.esxi = find_hostsystem_by_name(self.content, self.esxi_hostname)
        if self.esxi is None:
            self.module.fail_json(msg="Failed to find ESXi hostname %s " % self.esxi_hostname)
        self.reconciler = DatastoreReconciler(HostStorageService(self.esxi), module)

    def gather_facts(self):
        if self.datastore_name:
            facts = self.reconciler.facts(DatastoreSpec(self.datastore_name))
            return [facts.as_dict()] if facts else []

        datastores = self.reconciler.storage.list_datastores().unwrap()
        return [self.read_datastore(datastore) for datastore in datastores]

    def read_datastore(self, datastore):
        try:
            return DatastoreFacts(datastore, self.module).as_dict()
        except (vmodl.RuntimeFault, vmodl.MethodFault) as vmodl_fault:
            self.module.fail_json(msg=to_native(vmodl_fault.msg))


def main():
    argument_spec = vmware_argument_spec()
    argument_spec.update(
        datastore_name=dict(type='str', required=False),
        esxi_hostname=dict(type='str', required=True)
    )

    module = AnsibleModule(
        argument_spec=argument_spec,
        supports_check_mode=True,
    )

    try:
        vmware_datastore_facts = VMwareDatastoreFacts(module)
        datastores = vmware_datastore_facts.gather_facts()

        module.exit_json(changed=False, datastores=datastores)
    except Exception as e:
        module.fail_json(msg=to_native(e))


if __name__ == '__main__':
    main()

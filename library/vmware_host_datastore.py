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
module: vmware_host_datastore
short_description: Manage a NFS, CIFS or VMFS datastore on ESXi host
description:
- This module can be used to create and delete NAS and VMFS datastores on ESXi host.
- VMFS datastores are created on the unformatted disk matching C(lun), C(target_iqn) or C(target_model) and C(target_disk_id).
- The host storage is rescanned until the disk shows up or C(rescan_attempts) is exhausted.
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
    - Name of the datastore to add/remove.
    required: true
  datastore_type:
    description:
    - Type of the datastore.
    - Required if C(state) is C(present) and the datastore does not exist.
    choices: [ NFS, CIFS, VMFS ]
  esxi_hostname:
    description:
    - ESXi hostname to manage the datastore.
    required: true
  remote_host:
    description:
    - NFS or CIFS server serving the share.
    - Required if C(datastore_type) is C(NFS) or C(CIFS).
  remote_path:
    description:
    - Exported path on C(remote_host).
    - Required if C(datastore_type) is C(NFS) or C(CIFS).
  local_path:
    description:
    - Local name of the NAS mount, defaults to C(datastore_name).
  access_mode:
    description:
    - Access mode of the NAS mount.
    default: readWrite
    choices: [ readWrite, readOnly ]
  cifs_username:
    description:
    - User name for the CIFS share.
  cifs_password:
    description:
    - Password for the CIFS share.
  lun:
    description:
    - LUN number of the disk to create the VMFS datastore on.
  target_iqn:
    description:
    - iSCSI IQN (C(iqn.*)) or Fibre Channel identity (C(fc.<node wwn>:<port wwn>)) of the target exposing the disk.
  target_model:
    description:
    - Disk model, used together with C(target_disk_id) and C(lun).
  target_disk_id:
    description:
    - Part of the disk device name, used together with C(target_model) and C(lun).
  rescan_attempts:
    description:
    - Number of storage rescans while waiting for the VMFS disk to show up.
    default: 10
  rescan_delay:
    description:
    - Seconds to wait after each rescan.
    default: 10
  state:
    description:
    - "present: Create datastore on host if datastore is absent else do nothing."
    - "absent: Remove datastore if datastore is present else do nothing."
    default: present
    choices: [ present, absent ]
extends_documentation_fragment: community.vmware.vmware.documentation
'''

EXAMPLES = r'''
- name: Mount NFS datastore to ESXi
  vmware_host_datastore:
      hostname: '{{ vcenter_hostname }}'
      username: '{{ vcenter_user }}'
      password: '{{ vcenter_pass }}'
      datastore_name: nfs_datastore01
      datastore_type: NFS
      remote_host: nfs1.example.com
      remote_path: /export/ds01
      esxi_hostname: '{{ inventory_hostname }}'
      state: present
  delegate_to: localhost

- name: Create VMFS datastore on iSCSI LUN
  vmware_host_datastore:
      hostname: '{{ vcenter_hostname }}'
      username: '{{ vcenter_user }}'
      password: '{{ vcenter_pass }}'
      datastore_name: San_datastore01
      datastore_type: VMFS
      lun: 2
      target_iqn: iqn.2000-01.com.example:storage.lun2
      esxi_hostname: '{{ inventory_hostname }}'
  delegate_to: localhost

- name: Remove Datastore from ESXi
  vmware_host_datastore:
      hostname: '{{ vcenter_hostname }}'
      username: '{{ vcenter_user }}'
      password: '{{ vcenter_pass }}'
      datastore_name: San_datastore01
      esxi_hostname: '{{ inventory_hostname }}'
      state: absent
  delegate_to: localhost
'''

RETURN = r'''
result:
  description: Datastore and host the change was applied to.
  returned: changed
  type: str
'''

try:
    from pyVmomi import vmodl
except ImportError:
    pass

from ansible.module_utils.basic import AnsibleModule
from ansible.module_utils.common.text.converters import to_native
from ansible_collections.community.vmware.plugins.module_utils.vmware import vmware_argument_spec, PyVmomi

from esx_datastore import DatastoreError, DatastoreReconciler, DatastoreSpec, HostStorageService


class VMwareHostDatastore(PyVmomi):
    def __init__(self, module):
        super(VMwareHostDatastore, self).__init__(module)

        self.esxi_hostname = module.params['esxi_hostname']
        self.state = module.params['state']
        self.spec = DatastoreSpec.from_params(module.params)

        self.esxi = self.find_hostsystem_by_name(self.esxi_hostname)
        if self.esxi is None:
            self.module.fail_json(msg="Failed to find ESXi hostname %s " % self.esxi_hostname)

        self.reconciler = DatastoreReconciler(HostStorageService(self.esxi), module,
                                              attempts=module.params['rescan_attempts'],
                                              delay=module.params['rescan_delay'])

    def process_state(self):
        ds_states = {
            'present': self.create_datastore_host,
            'absent': self.remove_datastore_host
        }
        try:
            facts = self.reconciler.facts(self.spec)
            ds_states[self.state](facts)
        except DatastoreError as e:
            self.module.fail_json(msg=to_native(e.msg))
        except (vmodl.RuntimeFault, vmodl.MethodFault) as vmodl_fault:
            self.module.fail_json(msg=to_native(vmodl_fault.msg))
        except Exception as e:
            self.module.fail_json(msg=to_native(e))

    def state_exit_unchanged(self):
        self.module.exit_json(changed=False)

    def result_msg(self):
        return "Datastore %s on host %s" % (self.spec.datastore, self.esxi_hostname)

    def create_datastore_host(self, facts):
        if facts:
            if self.spec.type and facts.type != self.spec.type:
                facts.type = self.spec.type
            return self.state_exit_unchanged()

        if not self.spec.type:
            return self.module.fail_json(msg="datastore_type is required to create datastore %s" % self.spec.datastore)

        if not self.module.check_mode:
            self.reconciler.create(self.spec)
        self.module.exit_json(changed=True, result=self.result_msg())

    def remove_datastore_host(self, facts):
        if not facts:
            return self.state_exit_unchanged()

        if not self.module.check_mode:
            self.reconciler.destroy(self.spec)
        self.module.exit_json(changed=True, result=self.result_msg())


def main():
    argument_spec = vmware_argument_spec()
    argument_spec.update(
        esxi_hostname=dict(type='str', required=True),
        datastore_name=dict(type='str', required=True),
        datastore_type=dict(type='str', choices=['NFS', 'CIFS', 'VMFS']),
        remote_host=dict(type='str'),
        remote_path=dict(type='str'),
        local_path=dict(type='str'),
        access_mode=dict(type='str', default='readWrite', choices=['readWrite', 'readOnly']),
        cifs_username=dict(type='str'),
        cifs_password=dict(type='str', no_log=True),
        lun=dict(type='int'),
        target_iqn=dict(type='str'),
        target_model=dict(type='str'),
        target_disk_id=dict(type='str'),
        rescan_attempts=dict(type='int', default=10),
        rescan_delay=dict(type='int', default=10),
        state=dict(type='str', default='present', choices=['absent', 'present'])
    )

    module = AnsibleModule(
        argument_spec=argument_spec,
        required_if=[
            ['datastore_type', 'NFS', ['remote_host', 'remote_path']],
            ['datastore_type', 'CIFS', ['remote_host', 'remote_path']],
            ['datastore_type', 'VMFS', ['lun', 'target_iqn'], True],
        ],
        supports_check_mode=True,
    )

    vmware_host_datastore = VMwareHostDatastore(module)
    vmware_host_datastore.process_state()


if __name__ == '__main__':
    main()

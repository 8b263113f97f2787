# Copyright: (c) 2018, Ansible Project
# GNU General Public License v3.0+ (see COPYING or https://www.gnu.org/licenses/gpl-3.0.txt)

ISCSI = 'iscsi'
FC = 'fc'


def lun_type(target_identifier):
    """iSCSI for identifiers starting with 'iqn', Fibre Channel otherwise."""
    if target_identifier and target_identifier.startswith('iqn'):
        return ISCSI
    return FC


def fc_identity(transport):
    # fc.5000d310005ec401:5000d310005ec437
    return 'fc.%s:%s' % (format(transport.nodeWorldWideName, 'x'),
                         format(transport.portWorldWideName, 'x'))


class ScsiTopologyResolver(object):
    """Maps disk uuids to LUN numbers and target identities through the SCSI topology."""

    def __init__(self, storage, module):
        self.storage = storage
        self.module = module

    def _targets(self):
        for adapter in self.storage.scsi_topology().unwrap():
            for target in adapter.target:
                yield target

    def lun_number(self, uuid):
        for target in self._targets():
            for lun in target.lun:
                if uuid in lun.key:
                    return lun.lun
        return None

    def target_identity(self, uuid, kind):
        for target in self._targets():
            for lun in target.lun:
                if uuid not in lun.key:
                    continue
                if kind == ISCSI:
                    # Only iSCSI target transports carry iScsiName
                    if not hasattr(target.transport, 'iScsiName'):
                        continue
                    return target.transport.iScsiName
                if not hasattr(target.transport, 'nodeWorldWideName'):
                    continue
                return fc_identity(target.transport)
        return None

    def target_identity_for(self, uuid, target_identifier):
        kind = lun_type(target_identifier)
        self.module.debug("luntype : %s" % kind)
        return self.target_identity(uuid, kind)

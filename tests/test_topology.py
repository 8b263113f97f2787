# Copyright: (c) 2018, Ansible Project
# GNU General Public License v3.0+ (see COPYING or https://www.gnu.org/licenses/gpl-3.0.txt)

import unittest
from unittest import mock

from esx_datastore.topology import FC, ISCSI, ScsiTopologyResolver, lun_type
from tests.helpers import FakeHostStorage, adapter, fc_target, iscsi_target, scsi_lun

IQN = 'iqn.2000-01.com.example:storage.lun2'
NODE_WWN = 0x5000D310005EC401
PORT_WWN = 0x5000D310005EC437


class LunTypeTests(unittest.TestCase):
    def test_iqn_prefix_is_iscsi(self):
        self.assertEqual(lun_type(IQN), ISCSI)

    def test_anything_else_is_fc(self):
        self.assertEqual(lun_type('fc.5000d310005ec401:5000d310005ec437'), FC)
        self.assertEqual(lun_type(None), FC)


class ScsiTopologyResolverTests(unittest.TestCase):
    def resolver(self, *adapters):
        self.storage = FakeHostStorage(adapters=adapters)
        return ScsiTopologyResolver(self.storage, mock.MagicMock())

    def test_lun_number(self):
        resolver = self.resolver(
            adapter(iscsi_target(IQN, scsi_lun('aaa', 0), scsi_lun('bbb', 2))),
            adapter(fc_target(NODE_WWN, PORT_WWN, scsi_lun('ccc', 7))))

        self.assertEqual(resolver.lun_number('bbb'), 2)
        self.assertEqual(resolver.lun_number('ccc'), 7)
        self.assertIsNone(resolver.lun_number('zzz'))

    def test_lun_number_fetches_topology_each_call(self):
        resolver = self.resolver(adapter(iscsi_target(IQN, scsi_lun('aaa', 0))))

        resolver.lun_number('aaa')
        resolver.lun_number('aaa')

        self.assertEqual(self.storage.count('scsi_topology'), 2)

    def test_iscsi_identity(self):
        resolver = self.resolver(adapter(iscsi_target(IQN, scsi_lun('aaa', 2))))

        self.assertEqual(resolver.target_identity('aaa', ISCSI), IQN)

    def test_iscsi_identity_skips_transport_without_iscsi_name(self):
        resolver = self.resolver(
            adapter(fc_target(NODE_WWN, PORT_WWN, scsi_lun('aaa', 2))),
            adapter(iscsi_target(IQN, scsi_lun('aaa', 2))))

        self.assertEqual(resolver.target_identity('aaa', ISCSI), IQN)

    def test_iscsi_identity_never_falls_back_to_fc(self):
        resolver = self.resolver(adapter(fc_target(NODE_WWN, PORT_WWN, scsi_lun('aaa', 2))))

        self.assertIsNone(resolver.target_identity('aaa', ISCSI))

    def test_fc_identity_skips_iscsi_transport(self):
        resolver = self.resolver(
            adapter(iscsi_target(IQN, scsi_lun('aaa', 2))),
            adapter(fc_target(NODE_WWN, PORT_WWN, scsi_lun('aaa', 2))))

        self.assertEqual(resolver.target_identity('aaa', FC), 'fc.5000d310005ec401:5000d310005ec437')

    def test_fc_identity_is_lowercase_hex(self):
        resolver = self.resolver(adapter(fc_target(NODE_WWN, PORT_WWN, scsi_lun('aaa', 2))))

        self.assertEqual(resolver.target_identity('aaa', FC), 'fc.5000d310005ec401:5000d310005ec437')

    def test_first_match_wins(self):
        resolver = self.resolver(
            adapter(fc_target(NODE_WWN, PORT_WWN, scsi_lun('aaa', 2))),
            adapter(fc_target(0x10, 0x20, scsi_lun('aaa', 2))))

        self.assertEqual(resolver.target_identity('aaa', FC), 'fc.5000d310005ec401:5000d310005ec437')

    def test_target_identity_for_infers_type(self):
        resolver = self.resolver(
            adapter(fc_target(NODE_WWN, PORT_WWN, scsi_lun('aaa', 2))),
            adapter(iscsi_target(IQN, scsi_lun('aaa', 2))))

        self.assertEqual(resolver.target_identity_for('aaa', IQN), IQN)
        self.assertEqual(resolver.target_identity_for('aaa', 'fc.1:2'), 'fc.5000d310005ec401:5000d310005ec437')

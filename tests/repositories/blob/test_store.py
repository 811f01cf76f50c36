import json
import os
import tempfile
from unittest import TestCase

from faker import Faker

from repositories.blob import FileBlobStore, MemoryBlobStore


class TestMemoryBlobStore(TestCase):
    def setUp(self) -> None:
        self.faker = Faker()
        self.store = MemoryBlobStore()

    def test_save_load(self) -> None:
        value = {'name': self.faker.name(), 'items': [1, 2, 3]}
        self.store.save('key', value)

        loaded = self.store.load('key')
        self.assertEqual(loaded, value)

        # Loaded values are copies
        loaded['name'] = 'changed'
        self.assertEqual(self.store.load('key'), value)

    def test_load_missing(self) -> None:
        self.assertIsNone(self.store.load('missing'))

    def test_load_corrupt(self) -> None:
        self.store.blobs['key'] = '{not json'

        with self.assertLogs() as cm:
            self.assertIsNone(self.store.load('key'))

        self.assertNotIn('key', self.store.blobs)
        self.assertEqual(cm.records[0].levelname, 'WARNING')

    def test_remove_and_clear(self) -> None:
        self.store.save('a', 1)
        self.store.save('b', 2)

        self.store.remove('a')
        self.store.remove('missing')
        self.assertIsNone(self.store.load('a'))
        self.assertEqual(self.store.load('b'), 2)

        self.store.clear()
        self.assertIsNone(self.store.load('b'))


class TestFileBlobStore(TestCase):
    def setUp(self) -> None:
        self.faker = Faker()
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmp_dir.name, 'store.json')

    def tearDown(self) -> None:
        self.tmp_dir.cleanup()

    def test_persists_across_instances(self) -> None:
        value = [{'id': self.faker.uuid4(), 'salary': 95000}]
        FileBlobStore(self.path).save('corehr_employees', value)

        self.assertEqual(FileBlobStore(self.path).load('corehr_employees'), value)

        with open(self.path, encoding='utf-8') as f:
            raw = json.load(f)
        self.assertEqual(json.loads(raw['corehr_employees']), value)

    def test_missing_file(self) -> None:
        store = FileBlobStore(os.path.join(self.tmp_dir.name, 'nested', 'store.json'))

        self.assertIsNone(store.load('key'))

        store.save('key', 'value')
        self.assertEqual(store.load('key'), 'value')

    def test_corrupt_file(self) -> None:
        with open(self.path, 'w', encoding='utf-8') as f:
            f.write('garbage')

        store = FileBlobStore(self.path)
        with self.assertLogs() as cm:
            self.assertIsNone(store.load('key'))

        self.assertEqual(cm.records[0].levelname, 'ERROR')

    def test_remove_and_clear(self) -> None:
        store = FileBlobStore(self.path)
        store.save('a', 1)
        store.save('b', 2)

        store.remove('a')
        self.assertIsNone(store.load('a'))
        self.assertEqual(store.load('b'), 2)

        store.clear()
        self.assertIsNone(store.load('b'))

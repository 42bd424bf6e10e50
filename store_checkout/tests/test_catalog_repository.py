import os
from decimal import Decimal

from store_checkout.models.entities import CatalogEntry
from store_checkout.repositories import CatalogRepository, ICatalogRepository


def test_missing_file_loads_empty_with_warning(catalog_path, capsys):
    repo = CatalogRepository(catalog_path)
    assert repo.load() == []
    assert '[WARNING]' in capsys.readouterr().err


def test_save_then_load(catalog_path, widget):
    repo = CatalogRepository(catalog_path)
    entries = [widget, CatalogEntry('Nuts, salted', 'N1', Decimal('3.25'), 0, 7)]
    assert repo.save(entries) is True

    with open(catalog_path, encoding='utf-8') as f:
        assert f.read() == 'Widget,W1,10.00,10,2\nNuts, salted,N1,3.25,0,7\n'
    assert CatalogRepository(catalog_path).load() == entries
    assert not os.path.exists(catalog_path + '.tmp')


def test_malformed_and_blank_lines_are_skipped(catalog_path, capsys):
    with open(catalog_path, 'w', encoding='utf-8') as f:
        f.write('Widget,W1,10.00,10,2\n\nbroken line\nGadget,G7,4.50,0,12\n')

    entries = CatalogRepository(catalog_path).load()
    assert [e.identifier for e in entries] == ['W1', 'G7']
    assert ':3 skipped' in capsys.readouterr().err


def test_non_utf8_line_is_loaded_with_warning(catalog_path, capsys):
    with open(catalog_path, 'wb') as f:
        f.write(b'Caf\xe9,C1,2.50,0,3\nWidget,W1,10.00,10,2\n')

    entries = CatalogRepository(catalog_path).load()
    assert [e.identifier for e in entries] == ['C1', 'W1']
    assert entries[0].name == 'Caf\ufffd'
    err = capsys.readouterr().err
    assert '[WARNING]' in err
    assert ':1 is not valid UTF-8' in err


def test_unwritable_path_reports_error(tmp_path, widget, capsys):
    repo = CatalogRepository(str(tmp_path / 'no_such_dir' / 'inventory.txt'))
    assert repo.save([widget]) is False
    assert '[ERROR]' in capsys.readouterr().err


def test_implements_interface(catalog_path):
    assert isinstance(CatalogRepository(catalog_path), ICatalogRepository)

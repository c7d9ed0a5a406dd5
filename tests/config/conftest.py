"""
Shared fixtures for config module tests.
"""
import pytest


@pytest.fixture
def valid_config(tmp_path):
    """Complete valid configuration."""
    return {
        'output': {
            'directory': str(tmp_path / 'out'),
            'csv_separator': ';',
            'rom_list': 'roms.list',
            'csv_file': 'roms.csv',
            'json_file': 'roms.json',
            'write_rom_list': True,
        },
        'logging': {
            'level': 'INFO',
            'console': True,
            'file': None,
        },
    }

from setuptools import setup

setup(
    name='obfuscate-ids',
    version='1.0',
    description='Reversible, per-type obfuscation of integer IDs for public URLs.',
    python_requires='>=3.10',
    py_modules=[
        'config',
        'core_logic',
        'db_manager',
        'encoding',
        'errors',
        'models',
        'obfuscation',
        'registry',
        'router',
    ],
    install_requires=[
        'hashids>=1.3',
        'pydantic>=2.0',
        'pydantic-settings>=2.0',
        'fastapi>=0.100',
    ],
    extras_require={
        'test': [
            'pytest',
            'httpx',
        ],
    },
)

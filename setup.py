from setuptools import find_packages, setup

with open('README.md', 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='asset-registry',
    version='0.1.0',
    packages=find_packages(where='src'),
    package_dir={'': 'src'},
    include_package_data=True,
    install_requires=[
        'loguru>=0.7.2',
        'prometheus-client>=0.20.0',
        'pydantic>=2.7',
        'pydantic-settings>=2.3',
        'python-dotenv>=1.0',
    ],
    extras_require={
        'test': [
            'pytest>=8.0',
            'pytest-asyncio>=0.23',
            'pytest-mock>=3.12',
        ],
    },
    description='Asset registry: CRUD and enumeration of uniquely keyed assets over a transactional key-value ledger.',
    long_description=long_description,
    long_description_content_type='text/markdown',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Framework :: Pydantic :: 2',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    python_requires='>=3.11',
)

from setuptools import setup, find_packages

__version__ = '0.1.0'

requirements = [
    'astor>=0.8.1',
    'autopep8>=1.5.7',
    'stdlib_list>=0.10.0',
    'coloredlogs>=15.0',
]

test_requirements = [
    'pytest',
]

setup(
    name='exemplar',
    version=__version__,
    description='Pedagogical Python smart contracts and the host that runs them.',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=requirements,
    extras_require={
        'test': test_requirements,
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
    python_requires='>=3.9',
    zip_safe=False,
    include_package_data=True,
    package_data={
        'exemplar': ['contracts/*.s.py'],
    },
)

import setuptools
from setuptools import find_packages

with open('README.md', 'r') as fh:
    long_description = fh.read()

setuptools.setup(
    name='eventline',
    version='0.1',
    description='extract per-metric events from CSV records and merge them into disjoint intervals',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=find_packages(where=".", include=["eventline", "eventline.*"]),
    python_requires='>=3.9',
    install_requires=['pandas'],
    extras_require=dict(tests=["pytest"]),
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        ],
    )

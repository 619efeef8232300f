import os

from setuptools import find_packages, setup


def _read_requirements(root_dir, filename):
    with open(os.path.join(root_dir, filename)) as f:
        return [r.strip() for r in f if r.strip() and not r.startswith("#")]


def main():
    root_dir = os.path.dirname(os.path.abspath(__file__))

    requirements = _read_requirements(root_dir, 'requirements.txt')
    test_requirements = _read_requirements(root_dir, 'test_requirements.txt')

    setup(
        name='linear-containers',
        python_requires='>=3.8.0',
        version='0.1.0',
        description='Generic LIFO stack and FIFO queue containers',
        author='linear-containers maintainers',
        long_description='Generic LIFO stack and FIFO queue containers',
        license='Apache License 2.0',
        install_requires=requirements,
        package_dir={'': 'src'},
        packages=find_packages('src'),
        extras_require={
            "test": test_requirements,
        },
        classifiers=[
            # As from http://pypi.python.org/pypi?%3Aaction=list_classifiers
            'Development Status :: 4 - Beta',
            'Intended Audience :: Developers',
            'License :: OSI Approved :: Apache Software License',
            'Natural Language :: English',
            'Operating System :: OS Independent',
            'Programming Language :: Python :: 3',
            'Programming Language :: Python :: 3.8',
            'Programming Language :: Python :: 3.9',
            'Programming Language :: Python :: 3.10',
            'Programming Language :: Python :: 3.11',
            'Programming Language :: Python :: 3.12',
            'Topic :: Software Development :: Libraries :: Python Modules',
            'Programming Language :: Python :: Implementation :: CPython',
        ],
        keywords=['stack', 'queue', 'LIFO', 'FIFO', 'containers'],
    )


if __name__ == "__main__":
    main()

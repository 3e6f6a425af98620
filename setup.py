#!/usr/bin/env python
import setuptools


def dict_of(cls):
    """Decorator that converts a class into a dict of its public members."""
    return {k: v for k, v in cls.__dict__.items() if not k.startswith('_')}


@dict_of
class setup_params:
    name = 'buildr'
    version = '0.1'

    description = 'Embeddable incremental build orchestration'

    license = 'MIT'

    classifiers = [
        'Private :: Do Not Upload',

        'Development Status :: 3 - Alpha',

        'Intended Audience :: Developers',
        'Topic :: Software Development :: Build Tools',

        'License :: OSI Approved :: MIT License',

        'Programming Language :: Python :: 3',
    ]
    keywords = 'build make incremental automation development tools'

    packages = setuptools.find_packages(include=['buildr', 'buildr.*'])

    python_requires = '>=3.11'

    install_requires = [
        'ply>=3.4',
    ]

    @dict_of
    class extras_require:
        test = [
            'pytest',
        ]

        dev = test + [
            'pytest-cov',
        ]

    tests_require = extras_require['test']


if __name__ == '__main__':
    # Guarded to make the module importable by tools like pytest.
    setuptools.setup(**setup_params)

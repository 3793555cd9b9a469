from setuptools import setup

setup(
    name='oq-interpreter',
    version='0.1.0',
    description='oQ language interpreter with multilingual keyword dialects',
    author='oQ contributors',
    package_dir={'oq': 'src/oq'},
    packages=['oq', 'oq.parser', 'oq.evaluator', 'oq.cli'],
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'click>=7.0',
        'rich>=10.0'
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'oq = oq.cli.main:cli'
        ]
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
)

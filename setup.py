from setuptools import setup, find_packages

setup(
    name='tiny-lisp-compiler',
    version='0.1.0',
    py_modules=['tiny', 'compiler'],
    packages=find_packages(include=['tinyc', 'tinyc.*']),
    python_requires='>=3.9',
    install_requires=[
        'pydantic>=2.0',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'tiny = tiny:main',
        ],
    },
)

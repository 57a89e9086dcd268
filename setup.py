from setuptools import find_packages, setup

setup(
    name='symderiv',
    version='0.1',
    packages=find_packages(include=['symderiv', 'symderiv.*']),
    description='Symbolic differentiation with construction-time simplification',
    python_requires='>=3.8',
    install_requires=[
        'sympy>=1.13',
        'tqdm>=4.62',
        'matplotlib>=3.4',
    ],
    extras_require={
        'test': ['pytest>=8.0'],
    },
    entry_points={
        'console_scripts': ['symderiv=symderiv.cli:main'],
    },
)

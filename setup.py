from setuptools import find_packages, setup

setup(
    name='hashtable',
    version='0.1',
    packages=find_packages('src'),
    package_dir={'': 'src'},
    license='MIT License',
    description='A mutable hashtable which maintains its own element count',
    python_requires='>=3.9',
    install_requires=[
        'attrs>=22.2.0',
        'typing_extensions>=4.7.0',
    ],
    extras_require={
        'test': ['pytest>=7.0.0'],
    },
)

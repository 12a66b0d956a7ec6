import setuptools

setuptools.setup(
    name='swan-tart',
    version='0.0.1',
    install_requires=[
        'requests',
        'functions-framework',
        'google-cloud-storage'
    ],
    extras_require={
        'test': ['pytest'],
    },
    packages=setuptools.find_packages(exclude=['tests']),
)

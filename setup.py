import os

from setuptools import find_packages, setup


here = os.path.abspath(os.path.dirname(__file__))

about = {}
with open(os.path.join(here, "acceptfilter", "__version__.py")) as f:
    exec(f.read(), about)


def read(filename):
    with open(os.path.join(here, filename), 'rb') as f:
        return f.read().decode('utf-8')


setup(
    name='acceptfilter',
    version=about['__version__'],
    description=('Accept header negotiation for requests: rank Accept headers'
                 ' and reject responses with a Content-Type that was not asked for.'),
    long_description=read('README.md'),
    long_description_content_type='text/markdown',
    entry_points='''
        [console_scripts]
        acceptfilter=acceptfilter.negotiator.command_line:main
    ''',
    install_requires=[
        'requests',
        'colorama',
    ],
    extras_require={
        'test': ['pytest'],
    },
    packages=find_packages(),
    license='MIT',
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP',
    ]
)

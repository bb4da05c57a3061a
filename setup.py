from setuptools import setup, find_packages

README = ''

setup(name='ninja-writer',
      version='0.1',
      description='Writer for .ninja build files',
      long_description=README,
      classifiers=[
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Build Tools",
        ],
      author='',
      author_email='',
      url='',
      keywords='ninja build generator',
      packages=find_packages(exclude=['tests']),
      python_requires='>=3.7',
      zip_safe=False,
      install_requires=[],
      )

from setuptools import setup


def get_packages():
    return ['tattler',
            'tattler.shared']


def get_package_data():
    return {'tattler': ['global_config.ini']}


def run():
    setup(name='tattler',
          description='Mocks that record their calls, with stubbing and '
                      'verification',
          version='0.1.0',
          packages=get_packages(),
          package_data=get_package_data(),
          python_requires='>=3.7',
          extras_require={'test': ['pytest']},
          )


if __name__ == '__main__':
    run()

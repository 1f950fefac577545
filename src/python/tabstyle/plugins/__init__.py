# ==================================================================================================
# Copyright 2014 Twitter, Inc.
# --------------------------------------------------------------------------------------------------
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this work except in compliance with the License.
# You may obtain a copy of the License in the LICENSE file, or at:
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ==================================================================================================

"""
Checkstyle plugins.  Every CheckstylePlugin subclass defined in a module of
this package is picked up by list_plugins and run over each checked document.
"""

from importlib import import_module
import inspect
import logging
import pkgutil

from ..common import CheckstylePlugin


__all__ = ('list_plugins',)


log = logging.getLogger(__name__)


def is_plugin(member):
  return inspect.isclass(member) and issubclass(member, CheckstylePlugin) and (
      member is not CheckstylePlugin)


def list_plugins():
  """Return the plugin classes of every module in this package, ordered by module name."""
  plugins = []
  for module_info in sorted(pkgutil.iter_modules(__path__, __name__ + '.'), key=lambda m: m.name):
    if module_info.ispkg:
      continue
    module = import_module(module_info.name)
    for _, plugin in inspect.getmembers(module, is_plugin):
      if plugin.__module__ != module.__name__:
        continue
      log.debug('Registered plugin %s from %s', plugin.__name__, module.__name__)
      plugins.append(plugin)
  return plugins

"Release information for iis_manager."

version_info = {'major': 0, 'minor': 4, 'micro': 1}

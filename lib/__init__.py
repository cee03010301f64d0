"Administer IIS sites, pools, virtual directories, FTP, accounts and ACLs"

from iis_manager._version import version_info

IIS_MANAGER_VERSION = str("%(major)d.%(minor)d.%(micro)d" % version_info)

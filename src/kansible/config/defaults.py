# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/kansible/config/defaults.py

NAMESPACE = "ansible-test"

OPENSHIFT_ANSIBLE_IMAGE = "openshift/origin-ansible:v3.7"
OPENSHIFT_ANSIBLE_SERVICE_ACCOUNT = "openshift-ansible"

INVENTORY_CONFIGMAP = "ansible-inventory"
INVENTORY_KEY = "hosts"

SSH_PRIVATE_KEY_SECRET = "ssh-private-key"
SSH_PRIVATE_KEY_SECRET_KEY = "ssh-privatekey"
SSH_KEY_FILE_MODE = 0o600

JOB_NAME = "openshift-ansible-test-job"

PLAYBOOK = "playbooks/byo/config.yml"
PLAYBOOK_ROOT = "/usr/share/ansible/openshift-ansible"

# paths inside the job container
INVENTORY_MOUNT_PATH = "/ansible/inventory/"
INVENTORY_FILE = INVENTORY_MOUNT_PATH + INVENTORY_KEY
SSH_MOUNT_PATH = "/ansible/ssh/"
PRIVATE_KEY_FILENAME = "privatekey.pem"
PRIVATE_KEY_FILE = SSH_MOUNT_PATH + PRIVATE_KEY_FILENAME

RUN_AS_USER = 0
HOST_NETWORK = True
COMPLETIONS = 1
ACTIVE_DEADLINE_SECONDS = 60 * 60
VERBOSITY = 3

#!/usr/bin/env python3
import argparse
import os
import signal
import sys
from ansible_step.services.ansible_step_service import AnsibleStepService
from ansible_step.utils.logging import setup_logger

CWD = os.getcwd()
INTERRUPTED_EXIT_CODE = 130


def raise_interrupt(signum, frame):
    raise KeyboardInterrupt(f"Received signal {signum}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description='Run the configured Ansible ad-hoc and playbook steps')
    parser.add_argument('--steps', default=os.environ.get("ANSIBLE_STEP_FILE", f"{CWD}/ansible-steps.yaml"),
                        help='YAML file listing the steps to run')
    parser.add_argument('--installations',
                        default=os.environ.get("ANSIBLE_INSTALLATIONS_FILE", f"{CWD}/ansible-installations.yaml"),
                        help='YAML file listing the known Ansible installations')
    parser.add_argument('--credentials',
                        default=os.environ.get("ANSIBLE_CREDENTIALS_FILE", f"{CWD}/ansible-credentials.yaml"),
                        help='YAML file listing the SSH credentials')
    parser.add_argument('--workspace', default=os.environ.get("WORKSPACE", CWD),
                        help='Working directory for Ansible')
    parser.add_argument('--dry-run', action='store_true', help='Print the commands instead of running them')
    args = parser.parse_args(argv)

    logger = setup_logger("AnsibleStepRunner")
    signal.signal(signal.SIGTERM, raise_interrupt)

    try:
        logger.info(f"Starting Ansible steps from: {args.steps}")
        service = AnsibleStepService(
            args.steps,
            args.installations,
            args.credentials,
            workspace=args.workspace,
            dry_run=args.dry_run,
        )
        service.run()
        logger.info("Ansible steps completed successfully")
        return 0
    except KeyboardInterrupt:
        logger.warning("Ansible steps interrupted")
        return INTERRUPTED_EXIT_CODE
    except Exception as e:
        logger.error(f"Ansible steps failed: {e}")
        return 1

if __name__ == "__main__":
    sys.exit(main())

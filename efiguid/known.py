#!/usr/bin/python
""" well-known efi guid database """

from efiguid.table import GuidTable, make_entry

EfiGlobalVariable            = "8be4df61-93ca-11d2-aa0d-00e098032b8c"
EfiImageSecurityDatabase     = "d719b2cb-3d3a-4596-a3bc-dad00e67656f"
EfiSecureBootEnableDisable   = "f0a30bc7-af08-4556-99c4-001009c93a44"
EfiCustomModeEnable          = "c076ec0c-7028-4399-a072-71ee5c448b9f"

EfiCertX509                  = "a5c059a1-94e4-4aa7-87b5-ab155c2bf072"
EfiCertSha256                = "c1c41626-504c-4092-aca9-41f936934328"
EfiCertPkcs7                 = "4aafd29d-68df-49ee-8aa9-347d375665a7"

MicrosoftVendor              = "77fa9abd-0359-4d32-bd60-28f4e78f784b"
Shim                         = "605dab50-e046-4300-abb6-3dd810dd8b23"
RedHat                       = "0abba7dc-e516-4167-bbf5-4d9d1c739416"

Zero                         = "00000000-0000-0000-0000-000000000000"
NotValid                     = "ffffffff-ffff-ffff-ffff-ffffffffffff"

# (guid, name, description), symbol is efi_guid_<name>
known_guids = (
    # variable namespaces
    (EfiGlobalVariable,                      "global",          "EFI Global Variable"),
    (EfiImageSecurityDatabase,               "security",        "EFI Security Database"),
    (EfiSecureBootEnableDisable,             "secure_boot_enable", "Secure Boot Enable/Disable"),
    (EfiCustomModeEnable,                    "custom_mode",     "Custom Mode Enable"),
    ("eb704011-1402-11d3-8e77-00a0c969723b", "mtc",             "Monotonic Counter"),
    ("4c19049f-4137-4dd3-9c10-8b97a83ffdfa", "memory_type_info", "EFI Memory Type Information"),
    ("4b47d616-a8d6-4552-9d44-ccad2e0f4cf9", "iscsi_config",    "iSCSI Configuration"),
    ("d9bee56e-75dc-49d9-b4d7-b534210f637a", "cert_db",         "Authenticated Variable Certificate Database"),
    ("fd2340d0-3dab-4349-a6c7-3b4f12b48eae", "tls_ca_certificate", "TLS CA Certificate"),
    ("4a67b082-0a4c-41cf-b6c7-440b29bb8c4f", "systemd_loader",  "systemd-boot Loader Interface"),

    # signature list types
    (EfiCertX509,                            "x509_cert",       "X.509 Certificate"),
    (EfiCertSha256,                          "sha256",          "SHA-256 hash"),
    ("826ca512-cf10-4ac9-b187-be01496631bd", "sha1",            "SHA-1 hash"),
    ("0b6e5233-a65c-44c9-9407-d9ab83bfc8bd", "sha224",          "SHA-224 hash"),
    ("ff3e5307-9fd0-48c9-85f1-8ad56c701e01", "sha384",          "SHA-384 hash"),
    ("093e0fae-a6c4-4f50-9f1b-d41e2b89c19a", "sha512",          "SHA-512 hash"),
    ("3c5766e8-269c-4e34-aa14-ed776e85b3b6", "rsa2048",         "RSA 2048 pubkey"),
    ("e2b36190-879b-4a3d-ad8d-f2e7bba32784", "rsa2048_sha256",  "RSA 2048 with SHA-256"),
    ("3bd2a492-96c0-4079-b420-fcf98ef103ed", "x509_sha256",     "SHA-256 hash of X.509 Certificate"),
    ("7076876e-80c2-4ee6-aad2-28b349a6865b", "x509_sha384",     "SHA-384 hash of X.509 Certificate"),
    ("446dbf63-2502-4cda-bcfa-2465d2b0fe9d", "x509_sha512",     "SHA-512 hash of X.509 Certificate"),
    (EfiCertPkcs7,                           "pkcs7_cert",      "PKCS7 Certificate"),
    ("a7717414-c616-4977-9420-844712a735bf", "rsa2048_sha256_cert", "RSA 2048 with SHA-256 Certificate"),

    # signature owners
    (MicrosoftVendor,                        "microsoft",       "Microsoft"),
    (Shim,                                   "shim",            "shim"),
    (RedHat,                                 "redhat",          "Red Hat"),
    ("a0baa8a3-041d-48a8-bc87-c36d121b5e3d", "ovmf_enroll_default_keys", "OVMF EnrollDefaultKeys"),

    # protocols
    ("09576e91-6d3f-11d2-8e39-00a0c969723b", "device_path",     "EFI Device Path Protocol"),
    ("5b1b31a1-9562-11d2-8e3f-00a0c969723b", "loaded_image",    "EFI Loaded Image Protocol"),
    ("964e5b22-6459-11d2-8e39-00a0c969723b", "simple_file_system", "EFI Simple File System Protocol"),
    ("387477c1-69c7-11d2-8e39-00a0c969723b", "simple_text_input", "EFI Simple Text Input Protocol"),
    ("387477c2-69c7-11d2-8e39-00a0c969723b", "simple_text_output", "EFI Simple Text Output Protocol"),
    ("9042a9de-23dc-4a38-96fb-7aded080516a", "graphics_output", "EFI Graphics Output Protocol"),
    ("59324945-ec44-4c0d-b1cd-9db139df070c", "iscsi_initiator_name", "EFI iSCSI Initiator Name Protocol"),
    ("9fb9a8a1-2f4a-43a6-889c-d0f7b6c47ad5", "dhcp6_service_binding", "EFI DHCP6 Service Binding Protocol"),
    ("937fe521-95ae-4d1a-8929-48bcd90ad31a", "ip6_config",      "EFI IP6 Config Protocol"),

    # configuration tables
    ("eb9d2d30-2d88-11d3-9a16-0090273fc14d", "acpi",            "ACPI 1.0 Table"),
    ("8868e871-e4f1-11d3-bc22-0080c73c8881", "acpi_20",         "ACPI 2.0 Table"),
    ("eb9d2d31-2d88-11d3-9a16-0090273fc14d", "smbios",          "SMBIOS Table"),
    ("f2fd1544-9794-4a2c-992e-e5bbcf20e394", "smbios3",         "SMBIOS 3 Table"),
    ("eb9d2d2f-2d88-11d3-9a16-0090273fc14d", "mps",             "MPS Table"),
    ("6dcbd5ed-e82d-4c44-bda1-7194199ad92a", "fmp_capsule",     "Firmware Management Capsule"),
    ("39b68c46-f7fb-441b-b6ec-16b0f69821f3", "capsule_report",  "Capsule Report"),

    # firmware volumes and files
    ("8c8ce578-8a3d-4f1c-9935-896185c32dd3", "ffs",             "Firmware File System v2"),
    ("fff12b8d-7696-4c8b-a985-2747075b4f50", "nvdata",          "NV Data Firmware Volume"),
    ("aaf32c78-947b-439a-a180-2e144ec37792", "auth_vars",       "Authenticated Variable Store"),
    ("ee4e5898-3914-4259-9d6e-dc7bd79403cf", "lzma_compress",   "LZMA Compressed Section"),
    ("1ba0062e-c779-4582-8566-336ae8f78f09", "reset_vector",    "Reset Vector"),
    ("9e21fd93-9c72-4c15-8c4b-e77f1db2d792", "fv_main_compact", "OVMF FvMainCompact"),
    ("df1ccef6-f301-4a63-9661-fc6030dcc880", "sec_main",        "OVMF SecMain"),

    # ovmf metadata
    ("96b582de-1fb2-45f7-baea-a366c55a082d", "ovmf_guid_list",  "OVMF GUIDed Structure Table"),
    ("dc886566-984a-4798-a75e-5585a7bf67cc", "ovmf_sev_metadata_offset", "OVMF SEV Metadata Offset"),
    ("e47a6535-984a-4798-865e-4685a7bf8ec2", "tdx_metadata_offset", "TDX Metadata Offset"),
    ("7255371f-3a3b-4b04-927b-1da6efa8d454", "sev_hash_table_block", "SEV Hash Table Block"),
    ("4c2eb361-7d9b-4cc3-8081-127c90d3d294", "sev_secret_block", "SEV Secret Block"),
    ("00f771de-1a7e-4fcb-890e-68c77e2fb44e", "sev_processor_reset", "SEV Processor Reset"),

    # misc
    (Zero,                                   "zero",            "zeroed sentinel guid"),
    (NotValid,                               "not_valid",       "all ones sentinel guid"),
)

well_known = GuidTable(make_entry(guid, name, description = desc)
                       for (guid, name, desc) in known_guids)

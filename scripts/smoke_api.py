#!/usr/bin/env python3
"""
Smoke script for a running molecular database API
"""
import requests
import json
import time

BASE_URL = "http://localhost:8000"

def check_catalog():
    """Fetch the catalog and supported database list"""
    print("🧪 Checking catalog endpoints")
    print("-" * 50)
    
    for endpoint in ["/databases", "/databases/supported", "/databases/status"]:
        try:
            start_time = time.time()
            response = requests.get(f"{BASE_URL}{endpoint}", timeout=10)
            duration = time.time() - start_time
            
            status = "✅" if response.status_code == 200 else "❌"
            print(f"{status} {endpoint}: {duration:.2f}s ({response.status_code})")
            
            if endpoint == "/databases" and response.status_code == 200:
                summary = response.json().get("summary", {})
                print(f"  - Total databases: {summary.get('totalDatabases')}")
                print(f"  - Average response time: {summary.get('averageResponseTime')}")
        except requests.exceptions.RequestException as e:
            print(f"❌ {endpoint}: Request failed - {e}")

def check_search():
    """Run a fan-out search and a source query"""
    print("\n🔍 Checking search endpoints")
    print("-" * 50)
    
    try:
        response = requests.post(
            f"{BASE_URL}/databases/search",
            json={"query": "Aspirin", "categories": "genomic,protein,pathogenicity", "limit": 5},
            timeout=30
        )
        if response.status_code == 200:
            data = response.json()
            print(f"✅ Search returned {data['total_results']} entries")
            for category in data["results_by_category"]:
                print(f"  - {category['category']}: {len(category['databases'])} databases")
        else:
            print(f"❌ Search failed with status {response.status_code}: {response.text}")
        
        start_time = time.time()
        response = requests.post(
            f"{BASE_URL}/databases/query",
            json={"sequence": "ATGCGTACGTTAGC", "databases": ["ncbi_genbank", "pdb", "vfdb"], "queryType": "blast"},
            timeout=30
        )
        duration = time.time() - start_time
        if response.status_code == 200:
            metadata = response.json()["metadata"]
            print(f"✅ Query completed in {duration:.2f}s ({metadata['executionMode']})")
            print(f"📝 Metadata: {json.dumps(metadata)}")
        else:
            print(f"❌ Query failed with status {response.status_code}: {response.text}")
    except requests.exceptions.RequestException as e:
        print(f"❌ Request failed: {e}")
    except json.JSONDecodeError as e:
        print(f"❌ JSON decode error: {e}")

if __name__ == "__main__":
    check_catalog()
    check_search()
